"""
Tests for sharing persistent collections between threads
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from dictionary import Dict
from vector import Vector


class TestConcurrentForks:
  """Many threads deriving from the same version"""

  @pytest.fixture
  def pool(self):
    """Thread pool shut down after each test"""
    with ThreadPoolExecutor(max_workers=8) as executor:
      yield executor

  def test_vector_forks_from_one_version(self, pool):
    base = Vector([0, 1, 2])
    results = list(pool.map(lambda i: (i, base.push(i).push(i + 1)), range(200)))

    for i, vec in results:
      assert vec.to_list() == [0, 1, 2, i, i + 1]
    assert base.to_list() == [0, 1, 2]

  def test_vector_forks_after_pop(self, pool):
    base = Vector([0, 1, 2]).pop()
    results = list(pool.map(lambda i: (i, base.push(i)), range(200)))

    for i, vec in results:
      assert vec.to_list() == [0, 1, i]

  def test_dict_forks_from_one_version(self, pool):
    base = Dict({'shared': True})
    results = list(pool.map(lambda i: (i, base.set('k', i).set(f"own{i}", i)), range(200)))

    for i, d in results:
      assert d.to_dict() == {'shared': True, 'k': i, f"own{i}": i}
    assert base.to_dict() == {'shared': True}

  def test_dict_override_forks(self, pool):
    base = Dict({'k': -1})
    results = list(pool.map(lambda i: (i, base.set('k', i)), range(200)))

    for i, d in results:
      assert d.get('k') == i
    assert base.get('k') == -1

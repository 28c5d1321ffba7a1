"""
Test configuration for parliament tests
"""

import pytest
import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from conversions import nat
from dictionary import Dict
from vector import Vector


@pytest.fixture
def naturals():
  """Fresh unbounded counter for each test"""
  return nat()


@pytest.fixture
def abc_dict():
  return Dict({'a': 1, 'b': 2, 'c': 3})


@pytest.fixture
def small_vector():
  return Vector.of(1, 2, 3)

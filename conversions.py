"""
Conversions between native collections and parliament's persistent ones
"""

from collections.abc import Mapping
from typing import Any, Iterator

from dictionary import Dict
from vector import Vector


def immutable(data: Any) -> Any:
  """
  Converts lists and mappings into their persistent versions

  Lists and tuples become Vectors, converting their elements recursively.
  Mappings become Dicts. Anything else is returned unchanged.
  """
  if isinstance(data, (list, tuple)):
    return Vector([immutable(x) for x in data])
  if isinstance(data, Mapping):
    return Dict(data)
  return data


def mutable(data: Any) -> Any:
  """Converts persistent collections back into lists and dicts"""
  if isinstance(data, Vector):
    return data.map(mutable).to_list()
  if isinstance(data, Dict):
    return data.to_dict()
  return data


def nat() -> Iterator[int]:
  """The natural numbers 0, 1, 2, ... as an unbounded lazy sequence"""
  i = 0
  while True:
    yield i
    i += 1

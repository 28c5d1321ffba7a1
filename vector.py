"""
parliament Vector
Persistent ordered sequence stored as a chain of list segments

Each version owns the visible prefix of one segment and points at the
version it was built on. Pushing onto the newest version of a segment
appends in place; every other push starts a new one-element segment.
"""

from collections.abc import Sequence
from typing import Any, Callable, Iterator, List, Optional
import functools
import threading

from combinators import curry
from error_handling import VectorConstructionError
from logger import logger
from utilities import Persistent, range_length


# Guards the ownership check and the in-place append of the push fast path
_segment_lock = threading.Lock()


class Vector(Persistent):
  """
  Immutable vector with structural sharing

  Vector(seq) builds from a list, tuple or other ordered sequence;
  Vector() is empty. Anything else raises VectorConstructionError.
  """

  __slots__ = ('_segment', '_segment_length', '_parent', '_length')

  def __init__(self, collection: Optional[Sequence] = None):
    if collection is None:
      items = []
    elif isinstance(collection, Sequence) and not isinstance(collection, (str, bytes, bytearray)):
      items = list(collection)
    else:
      raise VectorConstructionError(collection)
    _init_node(self, items, None, len(items))

  # ==================== STRUCTURE ====================

  @property
  def length(self) -> int:
    return self._length

  @property
  def segment_length(self) -> int:
    return self._segment_length

  @property
  def parent(self) -> Optional['Vector']:
    return self._parent

  def __len__(self) -> int:
    return self._length

  def __repr__(self) -> str:
    return f"Vector({self.to_list()!r})"

  # ==================== CONSTRUCTION ====================

  @classmethod
  def of(cls, *elements: Any) -> 'Vector':
    """Build a vector from an argument list"""
    return cls(elements)

  @classmethod
  def empty(cls) -> 'Vector':
    return _create([])

  @classmethod
  def range(cls, start: float, stop: Optional[float] = None, step: float = 1) -> 'Vector':
    """
    Vector of numbers in [start, stop) spaced by step

    With a single argument the range is [0, start).

    A step that moves away from stop gives an empty vector; a zero step
    raises ValueError.

    Examples:
      Vector.range(4).to_list() -> [0, 1, 2, 3]
      Vector.range(2, 10, 2).to_list() -> [2, 4, 6, 8]
    """
    if stop is None:
      start, stop = 0, start
    count = range_length(start, stop, step)
    return _create([i * step + start for i in range(count)])

  # ==================== EDITS ====================

  def push(self, elem: Any) -> 'Vector':
    """Returns a vector with elem appended"""
    segment = self._segment
    with _segment_lock:
      if len(segment) == self._segment_length:
        segment.append(elem)
        return _create(segment, self._parent, self._segment_length + 1)

    logger.debug("Vector segment already extended, forking at length %d", self._length)
    return _create([elem], self)

  def pop(self) -> 'Vector':
    """Returns a vector without its last element; popping empty gives empty"""
    vector = self
    while vector is not None and vector._length > 0:
      if vector._segment_length > 0:
        return _create(vector._segment, vector._parent, vector._segment_length - 1)
      vector = vector._parent
    return _create([])

  def concat(*vectors: 'Vector') -> 'Vector':
    """Concatenates any number of vectors, left to right"""
    return _create([elem for vector in vectors for elem in vector.to_list()])

  # ==================== QUERIES ====================

  def to_list(self) -> List[Any]:
    """Converts the vector to a plain list"""
    chunks = []
    vector = self
    while vector is not None:
      chunks.append(vector._segment[:vector._segment_length])
      vector = vector._parent

    result = []
    for chunk in reversed(chunks):
      result.extend(chunk)
    return result

  def equal(a: 'Vector', b: 'Vector') -> bool:
    """True if both vectors hold equal elements in the same order"""
    if a._length != b._length:
      return False
    # Same buffer and same length means the same chain
    if a._segment is b._segment:
      return True
    return all(x == y for x, y in zip(a.to_list(), b.to_list()))

  equals = equal

  def __eq__(self, other: Any) -> bool:
    if not isinstance(other, Vector):
      return NotImplemented
    return self.equal(other)

  __hash__ = None

  def includes(self, elem: Any) -> bool:
    for x in self:
      if x == elem:
        return True
    return False

  def __contains__(self, elem: Any) -> bool:
    return self.includes(elem)

  def __iter__(self) -> Iterator[Any]:
    return iter(self.to_list())

  # ==================== HIGHER-ORDER ====================

  def map(self, f: Callable[[Any], Any]) -> 'Vector':
    return _create([f(x) for x in self.to_list()])

  def filter(self, f: Callable[[Any], Any]) -> 'Vector':
    return _create([x for x in self.to_list() if f(x)])

  def reduce(self, f: Callable[[Any, Any], Any], identity: Any) -> Any:
    return functools.reduce(f, self.to_list(), identity)

  def some(self, f: Callable[[Any], Any]) -> bool:
    return any(f(x) for x in self.to_list())

  def every(self, f: Callable[[Any], Any]) -> bool:
    return all(f(x) for x in self.to_list())


# ============================================================================
# NODE CONSTRUCTION
# ============================================================================

def _init_node(node: Vector, segment: list, parent: Optional[Vector], segment_length: int) -> None:
  # Exhausted segments are never kept as parents
  while parent is not None and parent._segment_length == 0:
    parent = parent._parent

  node._segment = segment
  node._segment_length = segment_length
  node._parent = parent
  node._length = segment_length + (parent._length if parent is not None else 0)


def _create(segment: list, parent: Optional[Vector] = None, segment_length: Optional[int] = None) -> Vector:
  if segment_length is None:
    segment_length = len(segment)

  if segment_length == 0 and parent is not None:
    return parent

  node = Vector.__new__(Vector)
  _init_node(node, segment, parent, segment_length)
  return node


# ============================================================================
# CURRIED FORMS (collection last)
# ============================================================================

@curry
def push(elem: Any, vector: Vector) -> Vector:
  return vector.push(elem)


def pop(vector: Vector) -> Vector:
  return vector.pop()


def to_list(vector: Vector) -> List[Any]:
  return vector.to_list()


@curry
def includes(elem: Any, vector: Vector) -> bool:
  return vector.includes(elem)


concat = Vector.concat
equal = Vector.equal
empty = Vector.empty
of = Vector.of

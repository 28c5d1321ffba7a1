"""
parliament generic operations
Higher-order collection functions that work on lists and tuples, persistent
collections and lazy iterators, always returning the same kind of collection
"""

from typing import Any, Callable, Iterator, List, Optional
from itertools import count, islice
import functools

from combinators import curry, is_truthy, seq
from stdlib import add, multiply
from utilities import SEQUENCE, PERSISTENT, LAZY, dispatch_by_kind, range_length


# ============================================================================
# LAZY HELPERS
# ============================================================================

def _same_sequence(coll: Any, items: Any) -> Any:
  return tuple(items) if isinstance(coll, tuple) else list(items)


def _lazy_map(f: Callable, source: Any) -> Iterator[Any]:
  for elem in source:
    yield f(elem)


def _lazy_filter(f: Callable, source: Any) -> Iterator[Any]:
  for elem in source:
    if f(elem):
      yield elem


def _lazy_uniq(source: Any) -> Iterator[Any]:
  seen = []
  for elem in source:
    if elem not in seen:
      seen.append(elem)
      yield elem


# ============================================================================
# CORE OPERATIONS
# ============================================================================

@curry
def map(f: Callable[[Any], Any], collection: Any) -> Any:
  """
  Maps over a collection with f

  Unlike the builtin, the result has the same kind as the input: lists give
  lists, vectors give vectors, iterators give lazy iterators.
  """
  return dispatch_by_kind("map", collection, {
    SEQUENCE: lambda coll: _same_sequence(coll, (f(x) for x in coll)),
    PERSISTENT: lambda coll: coll.map(f),
    LAZY: lambda coll: _lazy_map(f, coll),
  })


@curry
def filter(f: Callable[[Any], Any], collection: Any) -> Any:
  """Keeps the elements of a collection for which f is truthy"""
  return dispatch_by_kind("filter", collection, {
    SEQUENCE: lambda coll: _same_sequence(coll, (x for x in coll if f(x))),
    PERSISTENT: lambda coll: coll.filter(f),
    LAZY: lambda coll: _lazy_filter(f, coll),
  })


@curry
def reduce(f: Callable[[Any, Any], Any], identity: Any, collection: Any) -> Any:
  """Left fold of collection with f, starting from identity"""
  return dispatch_by_kind("reduce", collection, {
    SEQUENCE: lambda coll: functools.reduce(f, coll, identity),
    PERSISTENT: lambda coll: coll.reduce(f, identity),
    LAZY: lambda coll: functools.reduce(f, coll, identity),
  })


@curry
def take(n: int, coll: Any) -> Any:
  """
  Takes the first n elements; never pulls more than n from a lazy source

  A negative n takes nothing.
  """
  n = max(n, 0)
  return dispatch_by_kind("take", coll, {
    SEQUENCE: lambda c: c[:n],
    PERSISTENT: lambda c: c.of(*islice(c, n)),
    LAZY: lambda c: islice(c, n),
  })


@curry
def drop(n: int, coll: Any) -> Any:
  """
  Drops the first n elements

  On a lazy source the first n elements are skipped once, when the result
  is first pulled. A negative n drops nothing.
  """
  n = max(n, 0)
  return dispatch_by_kind("drop", coll, {
    SEQUENCE: lambda c: c[n:],
    PERSISTENT: lambda c: c.of(*islice(c, n, None)),
    LAZY: lambda c: islice(c, n, None),
  })


def _uniq_sequence(coll: Any) -> Any:
  ret = []
  for elem in coll:
    if elem not in ret:
      ret.append(elem)
  return _same_sequence(coll, ret)


def _uniq_persistent(coll: Any) -> Any:
  ret = coll.empty()
  for elem in coll:
    if not ret.includes(elem):
      ret = ret.push(elem)
  return ret


def uniq(coll: Any) -> Any:
  """Removes duplicate elements, keeping first-seen order; compares with =="""
  return dispatch_by_kind("uniq", coll, {
    SEQUENCE: _uniq_sequence,
    PERSISTENT: _uniq_persistent,
    LAZY: _lazy_uniq,
  })


# ============================================================================
# DERIVED OPERATIONS
# ============================================================================

compact = filter(is_truthy)


def flatten(collection: Any) -> List[Any]:
  """Splices every list element of collection into a single list"""
  result = []
  for element in collection:
    if isinstance(element, list):
      result.extend(element)
    else:
      result.append(element)
  return result


flat_map = seq(map, flatten)


def concat(*collections: Any) -> List[Any]:
  """Concatenates any number of lists; other arguments are appended as-is"""
  result = []
  for coll in collections:
    if isinstance(coll, list):
      result.extend(coll)
    else:
      result.append(coll)
  return result


sum = reduce(add, 0)
product = reduce(multiply, 1)


def range(start: float, stop: Optional[float] = None, step: float = 1) -> List[float]:
  """
  Returns numbers from start to stop (exclusive), in intervals of step

  Examples:
    range(2, 10, 2) -> [2, 4, 6, 8]
    range(3) -> [0, 1, 2]
    range(0, 5, -1) -> []
  """
  if stop is None:
    start, stop = 0, start
  return list(islice(count(start, step), range_length(start, stop, step)))


def head(collection: Any) -> Any:
  """First element of a collection, or None; pulls at most one element"""
  return next(iter(collection), None)


def tail(collection: Any) -> List[Any]:
  """All but the first element of a collection"""
  return list(collection)[1:]


# ============================================================================
# TRANSDUCERS
# ============================================================================

def _append(result: List[Any], x: Any) -> List[Any]:
  result.append(x)
  return result


def _push(result: Any, x: Any) -> Any:
  return result.push(x)


def transduce(xform: Callable, combine: Callable, init: Any, coll: Any) -> Any:
  """Transforms every element with xform and folds it into init with combine"""
  for elem in coll:
    init = combine(init, xform(elem))
  return init


def into(init: Any, xform: Callable, coll: Any) -> Any:
  """Transforms coll with xform, appending the results onto init"""
  return dispatch_by_kind("into", init, {
    SEQUENCE: lambda target: _same_sequence(target, transduce(xform, _append, list(target), coll)),
    PERSISTENT: lambda target: transduce(xform, _push, target, coll),
  })


def sequence(xform: Callable, coll: Any) -> Any:
  """Transforms coll with xform into a collection of the same kind"""
  return dispatch_by_kind("sequence", coll, {
    SEQUENCE: lambda c: transduce(xform, _append, [], c),
    PERSISTENT: lambda c: transduce(xform, _push, c.empty(), c),
    LAZY: lambda c: _lazy_map(xform, c),
  })

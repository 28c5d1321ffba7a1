"""
Utilities module for parliament
Contains common helper functions shared by the engines and the generic operations
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Dict, List, Optional, Callable
import inspect
import math

from error_handling import UnsupportedCollectionError
from logger import logger


# Collection kinds understood by the generic operations
SEQUENCE = "Sequence"
PERSISTENT = "Persistent"
LAZY = "Lazy"


# ==================== CAPABILITY INTERFACE ====================

class Persistent(ABC):
  """
  Capability interface for persistent collections

  Generic operations rebuild a persistent collection through these methods
  rather than assuming list semantics.
  """

  __slots__ = ()

  @classmethod
  @abstractmethod
  def of(cls, *elements: Any) -> 'Persistent':
    """Build a collection from an argument list"""

  @classmethod
  @abstractmethod
  def empty(cls) -> 'Persistent':
    """Return an empty collection of the same kind"""

  @abstractmethod
  def push(self, elem: Any) -> 'Persistent':
    """Return a new collection with elem appended"""

  @abstractmethod
  def includes(self, elem: Any) -> bool:
    """Membership by equality"""

  @abstractmethod
  def to_list(self) -> List[Any]:
    """Materialise into a fresh list"""


# ==================== VALUE UTILITIES ====================

def to_key(key: Any) -> str:
  """
  Coerce a dictionary key to its string representation

  Examples:
    to_key(1) -> "1"
    to_key("1") -> "1"
  """
  return key if isinstance(key, str) else str(key)


def is_function(f: Any) -> bool:
  """True if f can be called"""
  return callable(f)


def is_iterable(x: Any) -> bool:
  """True if x implements the iterator protocol"""
  return isinstance(x, Iterable)


def positional_arity(func: Callable) -> int:
  """
  Count the leading required positional parameters of a callable

  Counting stops at the first parameter with a default, at *args, or at a
  keyword-only parameter.

  Args:
    func: Callable to inspect

  Returns:
    Number of required positional parameters, or 0 if the signature
    cannot be inspected

  Examples:
    positional_arity(lambda a, b: a) -> 2
    positional_arity(lambda a, b=1: a) -> 1
    positional_arity(lambda *args: 0) -> 0
  """
  try:
    params = inspect.signature(func).parameters.values()
  except (TypeError, ValueError):
    logger.debug("No signature available for %r, assuming arity 0", func)
    return 0

  count = 0
  for param in params:
    if param.kind not in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
      break
    if param.default is not param.empty:
      break
    count += 1
  return count


def range_length(start: float, stop: float, step: float) -> int:
  """
  Number of elements in the half-open range [start, stop) walked by step

  Args:
    start: First value
    stop: Exclusive bound
    step: Distance between values; must not be zero

  Returns:
    Element count; 0 when step moves away from stop

  Examples:
    range_length(2, 10, 2) -> 4
    range_length(0, 5, -1) -> 0
    range_length(5, 0, -2) -> 3
  """
  if step == 0:
    raise ValueError("range step must not be zero")
  return max(0, math.ceil((stop - start) / step))


# ==================== COLLECTION DISPATCH ====================

def _kind_of(coll: Any) -> Optional[str]:
  if isinstance(coll, (list, tuple)):
    return SEQUENCE
  if isinstance(coll, Persistent):
    return PERSISTENT
  if is_iterable(coll):
    return LAZY
  return None


def collection_kind(coll: Any) -> str:
  """
  Classify a collection for the generic operations

  Args:
    coll: Collection to classify

  Returns:
    SEQUENCE for list/tuple, PERSISTENT for persistent collections,
    LAZY for any other iterable

  Raises:
    UnsupportedCollectionError if coll is not iterable at all
  """
  kind = _kind_of(coll)
  if kind is None:
    raise UnsupportedCollectionError(
      "collection_kind", coll, expected=[SEQUENCE, PERSISTENT, LAZY]
    )
  return kind


def dispatch_by_kind(
  op_name: str,
  coll: Any,
  handlers: Dict[str, Callable[[Any], Any]]
) -> Any:
  """
  Generic kind-based dispatch

  Args:
    op_name: Operation name for error messages
    coll: Collection to dispatch on
    handlers: Map of collection kinds to handler functions

  Returns:
    Result of calling the appropriate handler with coll

  Raises:
    UnsupportedCollectionError if no handler matches

  Examples:
    dispatch_by_kind("size", [1, 2], {SEQUENCE: len}) -> 2
  """
  handler = handlers.get(_kind_of(coll))
  if handler is None:
    logger.debug("%s: no handler for %s", op_name, type(coll).__name__)
    raise UnsupportedCollectionError(op_name, coll, expected=list(handlers))
  return handler(coll)

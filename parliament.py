"""
parliament - functional programming utilities with persistent collections

  import parliament as P

  P.take(3, P.drop(5, P.nat()))           # lazy: 5, 6, 7
  P.Vector([1, 2]).push(3).to_list()       # [1, 2, 3]
  P.Dict({'a': 1}).set('a', 9).get('a')    # 9
"""

from combinators import (
  ArityFunction, Curried,
  is_function, is_iterable, is_defined, is_truthy, is_falsy, not_,
  length, curry, arity, bind, seq, spread,
  const, id_, if_, match, equal, eq, print_,
)
from stdlib import (
  greater_than, gt, less_than, lt, and_, or_,
  add, subtract, multiply, divide, mod,
  get_builtin_function, list_builtin_functions,
)
from operations import (
  map, filter, reduce, take, drop, uniq,
  compact, flatten, flat_map, concat, sum, product, range,
  head, tail, transduce, into, sequence,
)
from conversions import immutable, mutable, nat
from dictionary import Dict
from vector import Vector
from error_handling import ParliamentError, VectorConstructionError, UnsupportedCollectionError
from logger import logger, setup_logger

__version__ = "0.1.0"

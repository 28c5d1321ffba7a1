"""
parliament Standard Library
Curried numeric and boolean combinators, plus the builtin function registry
"""

from typing import Dict, Callable, Any, List
import operator

from combinators import curry, const, equal, is_function
from error_handling import ParliamentError


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================

def val(x: Any) -> Callable:
  """Treat x as a thunk: functions are returned as-is, values are wrapped"""
  if is_function(x):
    return x
  return const(x)


# ============================================================================
# COMPARISON FUNCTIONS
# ============================================================================

@curry
def greater_than(limit: Any, n: Any) -> bool:
  """True if n is greater than limit"""
  return n > limit


@curry
def less_than(limit: Any, n: Any) -> bool:
  """True if n is less than limit"""
  return n < limit


gt = greater_than
lt = less_than


# ============================================================================
# BOOLEAN FUNCTIONS
# ============================================================================

@curry
def and_(a: Any, b: Any) -> bool:
  return bool(a and b)


@curry
def or_(a: Any, b: Any) -> bool:
  return bool(a or b)


# ============================================================================
# ARITHMETIC FUNCTIONS
# ============================================================================
# The first argument is the one usually partially applied, so add(1) is
# "add one" and subtract(1) is "subtract one".

@curry
def add(a: Any, b: Any) -> Any:
  return operator.add(b, a)


@curry
def subtract(a: Any, b: Any) -> Any:
  """b - a"""
  return operator.sub(b, a)


@curry
def multiply(a: Any, b: Any) -> Any:
  return operator.mul(b, a)


@curry
def divide(a: Any, b: Any) -> Any:
  """b / a"""
  return operator.truediv(b, a)


@curry
def mod(a: Any, b: Any) -> Any:
  """Remainder of b / a; either operand may be a thunk"""
  return val(b)() % val(a)()


# ============================================================================
# BUILT-IN FUNCTION REGISTRY
# ============================================================================

def make_builtin_function(name: str, func: Callable, type_signature: str = "") -> Dict:
  """Create a built-in function record"""
  return {
      'type': 'builtin_function',
      'name': name,
      'func': func,
      'type_signature': type_signature
  }


BUILTIN_FUNCTIONS: Dict[str, Dict] = {
    # Comparison functions
    "equal": make_builtin_function("equal", equal, "a -> a -> Bool"),
    "eq": make_builtin_function("eq", equal, "a -> a -> Bool"),
    "greaterThan": make_builtin_function("greaterThan", greater_than, "Num -> Num -> Bool"),
    "gt": make_builtin_function("gt", greater_than, "Num -> Num -> Bool"),
    "lessThan": make_builtin_function("lessThan", less_than, "Num -> Num -> Bool"),
    "lt": make_builtin_function("lt", less_than, "Num -> Num -> Bool"),

    # Boolean functions
    "and": make_builtin_function("and", and_, "a -> b -> Bool"),
    "or": make_builtin_function("or", or_, "a -> b -> Bool"),

    # Arithmetic functions
    "add": make_builtin_function("add", add, "Num -> Num -> Num"),
    "subtract": make_builtin_function("subtract", subtract, "Num -> Num -> Num"),
    "multiply": make_builtin_function("multiply", multiply, "Num -> Num -> Num"),
    "divide": make_builtin_function("divide", divide, "Num -> Num -> Num"),
    "mod": make_builtin_function("mod", mod, "Num -> Num -> Num"),
}


def get_builtin_function(name: str) -> Callable:
  """Get a built-in function by name"""
  if name in BUILTIN_FUNCTIONS:
    return BUILTIN_FUNCTIONS[name]['func']
  else:
    raise ParliamentError(f"Unknown built-in function: {name}")


def list_builtin_functions() -> List[str]:
  """List all available built-in functions"""
  return list(BUILTIN_FUNCTIONS.keys())

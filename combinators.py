"""
parliament combinators
Currying, arity bookkeeping, composition and small function helpers
"""

from typing import Any, Callable, Optional
import functools

from utilities import is_function, is_iterable, positional_arity


__all__ = [
  "ArityFunction", "Curried",
  "is_function", "is_iterable", "is_defined", "is_truthy", "is_falsy", "not_",
  "length", "curry", "arity", "bind", "seq", "spread",
  "const", "id_", "if_", "match", "equal", "eq", "print_",
]


# ============================================================================
# ARITY-CARRYING WRAPPERS
# ============================================================================

class ArityFunction:
  """
  Callable wrapper carrying an explicit arity

  Partially applied callables lose their useful signature, so the number of
  arguments still expected travels alongside the function instead.
  """

  def __init__(self, func: Callable, arity: int):
    functools.update_wrapper(self, func, updated=())
    self.func = func
    self.arity = arity

  def __call__(self, *args: Any) -> Any:
    return self.func(*args)

  def __repr__(self) -> str:
    name = getattr(self.func, '__name__', type(self.func).__name__)
    return f"<{type(self).__name__} {name}/{self.arity}>"


class Curried(ArityFunction):
  """Function that collects arguments until its arity is satisfied"""

  def __call__(self, *args: Any) -> Any:
    if self.arity > 0 and not args:
      return self
    if len(args) >= self.arity:
      return self.func(*args)
    return Curried(functools.partial(self.func, *args), self.arity - len(args))


# ============================================================================
# PREDICATES
# ============================================================================

def not_(f: Callable) -> Callable:
  """Boolean negation of the application of f"""
  def negated(*args: Any) -> bool:
    return not f(*args)
  return negated


def is_defined(x: Any) -> bool:
  """True unless x is None"""
  return x is not None


is_truthy = bool
is_falsy = not_(is_truthy)


# ============================================================================
# ARITY
# ============================================================================

def length(x: Any) -> int:
  """
  Arity of a function, or the length of anything else

  Library wrappers report their explicit arity; other callables report the
  number of required positional parameters.

  Examples:
    length([1, 2, 3]) -> 3
    length(lambda a, b: a) -> 2
    length(curry(lambda a, b: a)(1)) -> 1
  """
  if isinstance(x, ArityFunction):
    return x.arity
  if is_function(x):
    return positional_arity(x)
  return len(x)


def curry(f: Callable, arity: Optional[int] = None) -> Curried:
  """
  Returns a curried version of f

  Args:
    f: Function to curry
    arity: Number of arguments to collect, defaults to length(f)

  Returns:
    Curried wrapper; calling it with fewer arguments than its arity
    returns another Curried expecting the rest

  Examples:
    curry(lambda a, b, c: a + b + c)(1)(2)(3) -> 6
    curry(lambda a, b, c: a + b + c)(1, 2)(3) -> 6
  """
  if arity is None:
    arity = length(f)
  return Curried(f, arity)


@curry
def arity(n: int, f: Callable) -> Curried:
  """Enforce arity n on f"""
  return curry(f, n)


def bind(f: Callable, *args: Any) -> ArityFunction:
  """Bind leading arguments to f, keeping track of the remaining arity"""
  return ArityFunction(functools.partial(f, *args), max(0, length(f) - len(args)))


# ============================================================================
# COMPOSITION
# ============================================================================

def seq(*fns: Callable) -> Callable:
  """
  Compose functions left to right

  The first function receives every argument; each following function
  receives the previous result.

  Examples:
    seq(lambda a: a + 1, lambda a: a * 2)(10) -> 22
  """
  if not fns:
    raise ValueError("seq requires at least one function")

  def pipeline(*args: Any) -> Any:
    result = fns[0](*args)
    for f in fns[1:]:
      result = f(result)
    return result

  return pipeline


@curry
def spread(f: Callable, args: Any) -> Any:
  """Call f with the elements of args as positional arguments"""
  return f(*args)


def const(x: Any) -> Callable:
  """Function that always returns x"""
  def constant(*args: Any) -> Any:
    return x
  return constant


def id_(x: Any) -> Any:
  """The identity function"""
  return x


# ============================================================================
# CONTROL FLOW
# ============================================================================

def if_(expr: Callable, then: Callable, otherwise: Optional[Callable] = None, *args: Any) -> Any:
  """
  Conditional evaluation, curried with the arity of expr

  Examples:
    if_(const(True), const(5), const(0)) -> 5
    if_(gt(5), const(True), const(False))(6) -> True
  """
  def conditional(*inner: Any) -> Any:
    if expr(*inner):
      return then(*inner)
    if otherwise is not None:
      return otherwise(*inner)
    return None

  return curry(conditional, length(expr))(*args)


def match(*fns: Callable) -> Callable:
  """Returns a function evaluating fns in order until one returns a defined value"""
  def matcher(*args: Any) -> Any:
    for f in fns:
      result = f(*args)
      if is_defined(result):
        return result
    return None
  return matcher


@curry
def equal(a: Any, b: Any) -> bool:
  return a == b


eq = equal


def print_(x: Any) -> Any:
  """Print x and return it, so it can sit inside a composition chain"""
  print(x)
  return x

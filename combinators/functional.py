"""Higher-order functions built on closures.

Composition, memoization and partial application. Each factory returns a new
closure; state captured by one closure is never visible to another.
"""

import logging
from typing import Any
from typing import Callable
from typing import Dict
from typing import Hashable
from typing import Tuple
from typing import TypeVar

R = TypeVar("R")

log = logging.getLogger("combinators.functional")

# Cache key for a memoized call made without an argument
_NO_ARG = object()


def get_composition(
    f: Callable[[Any], R], g: Callable[[Any], Any]
) -> Callable[[Any], R]:
    """
    Compose two unary functions.

    get_composition(f, g)(x) == f(g(x))

    Args:
        f: Outer function
        g: Inner function

    Returns:
        Composed unary function

    Example:
        >>> import math
        >>> get_composition(math.sin, math.asin)(0.5)
        0.5
    """
    def composition(x: Any) -> R:
        return f(g(x))
    return composition


def memoize(func: Callable[..., R]) -> Callable[..., R]:
    """
    Memoize a unary function (cache results by argument).

    The wrapped function is invoked at most once per distinct argument.
    Hashable arguments are keyed by type and equality, so ``1``, ``1.0`` and
    ``True`` are distinct keys; unhashable arguments are keyed by identity.
    Calls that raise are not cached. Called without an argument, the
    niladic result is cached on its own.

    Args:
        func: Function to memoize

    Returns:
        Memoized version of function

    Example:
        >>> import random
        >>> memoizer = memoize(lambda: random.random())
        >>> memoizer() == memoizer()
        True
    """
    if not callable(func):
        raise TypeError(f"memoize() expects a callable, got {type(func).__name__}")

    cache: Dict[Hashable, R] = {}
    # id(arg) -> (arg, result); holding arg keeps its id from being reused
    by_identity: Dict[int, Tuple[Any, R]] = {}

    def memoized(*args: Any) -> R:
        if len(args) > 1:
            raise TypeError(
                f"memoized {_name_of(func)}() takes at most 1 argument ({len(args)} given)"
            )
        arg = args[0] if args else _NO_ARG
        key = (type(arg), arg)
        try:
            hash(key)
        except TypeError:
            entry = by_identity.get(id(arg))
            if entry is not None:
                return entry[1]
            result = func(*args)
            by_identity[id(arg)] = (arg, result)
            return result

        if key in cache:
            log.debug("memoize hit: %s", _name_of(func))
            return cache[key]
        log.debug("memoize miss: %s", _name_of(func))
        result = func(*args)
        cache[key] = result
        return result

    return memoized


def partial_using_arguments(fn: Callable[..., R], *bound: Any) -> Callable[..., R]:
    """
    Bind leading positional arguments of a function.

    The completer calls ``fn(*bound, *args, **kwargs)`` on every invocation
    and returns its result.

    Args:
        fn: Function to partially apply
        *bound: Leading positional arguments, fixed at creation time

    Returns:
        Function of the remaining arguments

    Example:
        >>> def concat(x1, x2, x3, x4):
        ...     return x1 + x2 + x3 + x4
        >>> partial_using_arguments(concat, "a", "b")("c", "d")
        'abcd'
    """
    if not callable(fn):
        raise TypeError(
            f"partial_using_arguments() expects a callable, got {type(fn).__name__}"
        )
    bound_args = tuple(bound)

    def completer(*args: Any, **kwargs: Any) -> R:
        return fn(*bound_args, *args, **kwargs)

    return completer


def _name_of(func: Callable[..., Any]) -> str:
    return getattr(func, "__name__", type(func).__name__)


__all__ = [
    "get_composition",
    "memoize",
    "partial_using_arguments",
]

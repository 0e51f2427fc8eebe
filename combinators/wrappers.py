"""Call wrappers: bounded retry and call logging.

Usage::

    from combinators.wrappers import logger, retry

    cos_logger = logger(math.cos, print)
    cos_logger(math.pi)   # prints "cos(3.141592653589793) starts" / "... ends"

    retry(fetch_token, attempts=2)   # up to 3 calls in total
"""

from __future__ import annotations

import functools
import inspect
import logging
from typing import Any
from typing import Awaitable
from typing import Callable
from typing import Dict
from typing import Optional
from typing import Sequence
from typing import TypeVar

R = TypeVar("R")

log = logging.getLogger("combinators.wrappers")


def retry(func: Callable[[], R], attempts: int) -> R:
    """
    Call a niladic function, retrying it when it raises.

    The first call is followed by at most ``attempts`` retries, so ``func``
    is invoked ``attempts + 1`` times at most. The first successful result
    is returned; when every call fails, the last exception is re-raised
    unchanged.

    Args:
        func: Function to call
        attempts: Number of retries after the first call

    Returns:
        Result of the first successful call

    Raises:
        ValueError: ``attempts`` is negative
        Exception: Whatever the final failed call raised

    Example:
        >>> calls = []
        >>> def flaky():
        ...     calls.append(1)
        ...     if len(calls) % 2:
        ...         raise RuntimeError("test")
        ...     return len(calls)
        >>> retry(flaky, 2)
        2
    """
    _check_callable("retry", func)
    _check_attempts(attempts)
    name = _name_of(func)
    total = attempts + 1
    for attempt in range(1, total):
        try:
            return func()
        except Exception as exc:
            log.warning(
                "retry: %s attempt %d/%d failed (%s)", name, attempt, total, exc
            )
    try:
        return func()
    except Exception as exc:
        log.error("retry: %s failed after %d attempts (%s)", name, total, exc)
        raise


def logger(
    func: Callable[..., Any],
    log_func: Callable[[str], Any],
    name: Optional[str] = None,
) -> Callable[..., Any]:
    """
    Return a logging wrapper for the specified function.

    The wrapper passes a single string to ``log_func`` before and after
    calling ``func``::

        <function name>(<arg1>,<arg2>,...,<argN>) starts
        <function name>(<arg1>,<arg2>,...,<argN>) ends

    If ``func`` raises, the "ends" line is not written. A coroutine function
    (or an object with an ``async def __call__``) yields a coroutine function
    wrapper which writes "ends" once the awaited call has completed; in that
    mode ``log_func`` may itself be async. When a plain callable returns an
    awaitable, the wrapper returns a coroutine that writes "ends" after it.

    Args:
        func: Function to wrap
        log_func: Sink receiving each log line
        name: Name to log instead of ``func.__name__``

    Returns:
        Wrapped function returning ``func``'s result

    Example:
        >>> import math
        >>> cos_logger = logger(math.cos, print)
        >>> cos_logger(math.pi)
        cos(3.141592653589793) starts
        cos(3.141592653589793) ends
        -1.0
    """
    _check_callable("logger", func)
    _check_callable("logger", log_func)
    func_name = name if name is not None else _name_of(func)

    if _is_async(func):

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            call = format_call(func_name, args, kwargs)
            await _emit(log_func, f"{call} starts")
            result = await func(*args, **kwargs)
            await _emit(log_func, f"{call} ends")
            return result

        return async_wrapper

    if inspect.iscoroutinefunction(log_func):
        raise TypeError("logger() accepts an async log_func only for async functions")

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        call = format_call(func_name, args, kwargs)
        log_func(f"{call} starts")
        result = func(*args, **kwargs)
        if inspect.isawaitable(result):
            return _log_when_awaited(result, log_func, f"{call} ends")
        log_func(f"{call} ends")
        return result

    return wrapper


def format_call(
    name: str,
    args: Sequence[Any],
    kwargs: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Render a call as ``name(arg1,arg2,key=value)``.

    Top-level arguments use ``str()``. Lists and tuples render as
    ``[item,item]`` with string items double quoted.

    Example:
        >>> format_call("test", (["expected", "test", 1], 0))
        'test(["expected","test",1],0)'
    """
    parts = [_format_arg(arg) for arg in args]
    parts.extend(f"{key}={_format_arg(value)}" for key, value in (kwargs or {}).items())
    return f"{name}({','.join(parts)})"


def _format_arg(value: Any, nested: bool = False) -> str:
    if isinstance(value, str):
        return f'"{value}"' if nested else value
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_format_arg(item, nested=True) for item in value) + "]"
    return str(value)


async def _emit(log_func: Callable[[str], Any], message: str) -> None:
    outcome = log_func(message)
    if inspect.isawaitable(outcome):
        await outcome


async def _log_when_awaited(
    awaitable: Awaitable[Any], log_func: Callable[[str], Any], message: str
) -> Any:
    result = await awaitable
    await _emit(log_func, message)
    return result


def _is_async(func: Callable[..., Any]) -> bool:
    if inspect.iscoroutinefunction(func):
        return True
    return inspect.iscoroutinefunction(getattr(type(func), "__call__", None))


def _check_callable(factory: str, func: Any) -> None:
    if not callable(func):
        raise TypeError(f"{factory}() expects a callable, got {type(func).__name__}")


def _check_attempts(attempts: int) -> None:
    if attempts < 0:
        raise ValueError(f"attempts must be >= 0, got {attempts}")


def _name_of(func: Callable[..., Any]) -> str:
    return getattr(func, "__name__", type(func).__name__)


__all__ = ["retry", "logger", "format_call"]

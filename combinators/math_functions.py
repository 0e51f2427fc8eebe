"""Factories for parametrized mathematical functions.

Both factories rely on arithmetic operators, so the returned functions
accept anything that supports them (ints, floats, numpy arrays).
"""

import math
from typing import Any
from typing import Callable
from typing import Optional

from combinators.config import MAX_POLYNOM_COEFFICIENTS


def get_power_function(exponent: float) -> Callable[[Any], Any]:
    """
    Return the power function with the specified exponent.

    Scalars follow IEEE floating-point pow: a negative base with a
    fractional exponent gives ``nan`` and a zero base with a negative
    exponent gives ``inf``. Arrays are raised element-wise.

    Args:
        exponent: Fixed exponent (negative and fractional values allowed)

    Returns:
        Function computing ``x ** exponent``

    Example:
        >>> power05 = get_power_function(0.5)
        >>> power05(16)
        4.0
    """
    def power(x: Any) -> Any:
        if not isinstance(x, (int, float)):
            return x ** exponent
        try:
            result = x ** exponent
        except ZeroDivisionError:
            return math.inf
        if isinstance(result, complex):
            return math.nan
        return result
    return power


def get_polynom(*coefficients: float) -> Optional[Callable[[Any], Any]]:
    """
    Return a polynomial of one argument, highest degree coefficient first.

        get_polynom(2, 3, 5) => y = 2*x^2 + 3*x + 5
        get_polynom(1, -3)   => y = x - 3
        get_polynom(8)       => y = 8
        get_polynom()        => None

    Raises:
        ValueError: More than three coefficients were given
    """
    if len(coefficients) > MAX_POLYNOM_COEFFICIENTS:
        raise ValueError(
            f"get_polynom() supports at most {MAX_POLYNOM_COEFFICIENTS} "
            f"coefficients, got {len(coefficients)}"
        )
    if not coefficients:
        return None

    if len(coefficients) == 1:
        (c,) = coefficients

        def constant(x: Any = None) -> Any:
            return c
        return constant

    if len(coefficients) == 2:
        a, b = coefficients

        def linear(x: Any) -> Any:
            return a * x + b
        return linear

    a, b, c = coefficients

    def quadratic(x: Any) -> Any:
        return a * x * x + b * x + c
    return quadratic


__all__ = ["get_power_function", "get_polynom"]

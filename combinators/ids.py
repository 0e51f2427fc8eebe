"""Monotonic id generators."""

import itertools
from typing import Callable


def get_id_generator_function(start_from: int) -> Callable[[], int]:
    """
    Return a function producing consecutive ids starting from ``start_from``.

    Example:
        >>> get_id4 = get_id_generator_function(4)
        >>> get_id10 = get_id_generator_function(10)
        >>> get_id4(), get_id10(), get_id4()
        (4, 10, 5)
    """
    counter = itertools.count(start_from)

    def next_id() -> int:
        return next(counter)
    return next_id


__all__ = ["get_id_generator_function"]

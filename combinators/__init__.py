"""
Closure Combinators - higher-order function factories built on closures.

Every public factory returns a closure that owns its private state (if any);
no two closures ever share mutable state.
"""

from combinators.functional import get_composition
from combinators.functional import memoize
from combinators.functional import partial_using_arguments
from combinators.ids import get_id_generator_function
from combinators.main import configure_logging
from combinators.math_functions import get_polynom
from combinators.math_functions import get_power_function
from combinators.wrappers import format_call
from combinators.wrappers import logger
from combinators.wrappers import retry

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "get_composition",
    "get_power_function",
    "get_polynom",
    "memoize",
    "retry",
    "logger",
    "format_call",
    "partial_using_arguments",
    "get_id_generator_function",
    "configure_logging",
]

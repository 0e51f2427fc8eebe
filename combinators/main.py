import logging
import math
import os

from combinators.config import LOG_DATEFMT
from combinators.config import LOG_FORMAT
from combinators.config import LOG_LEVEL
from combinators.functional import get_composition
from combinators.functional import memoize
from combinators.functional import partial_using_arguments
from combinators.ids import get_id_generator_function
from combinators.math_functions import get_polynom
from combinators.math_functions import get_power_function
from combinators.wrappers import logger as call_logger


def configure_logging() -> None:
    level_name = os.getenv("LOG_LEVEL", logging.getLevelName(LOG_LEVEL)).upper()
    level = getattr(logging, level_name, LOG_LEVEL)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
    # Package namespace
    logging.getLogger("combinators").setLevel(level)


log = logging.getLogger("combinators")


def _concat(x1: str, x2: str, x3: str, x4: str) -> str:
    return x1 + x2 + x3 + x4


def main() -> None:
    """CLI entry: run the documented examples, logging each call."""
    configure_logging()

    examples = [
        ("getComposition", get_composition(math.sin, math.asin), 0.5),
        ("getPowerFunction", get_power_function(0.5), 16),
        ("getPolynom", get_polynom(2, 3, 5), 1),
        ("memoize", memoize(math.sqrt), 81),
    ]
    for name, func, arg in examples:
        logged = call_logger(func, log.info, name=name)
        log.info("%s => %s", name, logged(arg))

    concat_ab = partial_using_arguments(_concat, "a", "b")
    log.info("partialUsingArguments => %s", concat_ab("c", "d"))

    next_id = get_id_generator_function(4)
    log.info("getIdGeneratorFunction => %s", [next_id() for _ in range(3)])


if __name__ == "__main__":
    main()

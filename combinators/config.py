from __future__ import annotations
import logging

# Logging
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# Polynomials are supported up to degree 2
MAX_POLYNOM_COEFFICIENTS = 3

"""Runtime configuration for the area-check service.

Architectural role:
    Centralizes the static validation table consumed by `areacheck.core.engine` and
    the environment-driven transport settings consumed by `areacheck.api`.

Validation table:
    Coordinate bounds, the legal scale set, the scale tolerance and the maximum raw
    numeric string length are module constants. They are bundled into the immutable
    `DEFAULT_RULES` value, which the pipeline receives as an argument, so tests can
    pass their own `ValidationRules` without touching module state.

Determinism:
    Values are resolved at import time for a fixed process environment.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


# Inclusive coordinate bounds in raw (unscaled) space.
X_BOUNDS = (-3.0, 3.0)
Y_BOUNDS = (-5.0, 5.0)

LEGAL_SCALES = (1.0, 1.5, 2.0, 2.5, 3.0)
SCALE_TOLERANCE = 0.20

MAX_NUMERIC_LENGTH = 10

# Transport settings.
DEBUG = os.getenv("AREACHECK_DEBUG") == "true"
SESSION_COOKIE_NAME = os.getenv("AREACHECK_SESSION_COOKIE", "AREACHECK_SESSION")
LOG_LEVEL = os.getenv("AREACHECK_LOG_LEVEL", "INFO")
# Idle seconds after which an HTTP session history is dropped.
SESSION_TTL_SECONDS = float(os.getenv("AREACHECK_SESSION_TTL", "1800"))


@dataclass(frozen=True)
class ValidationRules:
    """Immutable validation table passed through the pipeline.

    Attributes:
        x_bounds: Inclusive `(lower, upper)` bounds for `pointX`.
        y_bounds: Inclusive `(lower, upper)` bounds for `pointY`.
        scale_table: `(legal_value, tolerance)` pairs, searched in order.
        max_length: Maximum accepted length of a raw numeric string.
    """

    x_bounds: tuple[float, float] = X_BOUNDS
    y_bounds: tuple[float, float] = Y_BOUNDS
    scale_table: tuple[tuple[float, float], ...] = tuple(
        (value, SCALE_TOLERANCE) for value in LEGAL_SCALES
    )
    max_length: int = MAX_NUMERIC_LENGTH


DEFAULT_RULES = ValidationRules()


def configure_logging(level=None):
    """Apply the process-wide log level. Called by entrypoints only."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

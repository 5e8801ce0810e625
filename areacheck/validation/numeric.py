"""Bounded numeric parsing for raw request values.

Parsing rules:
    1. Length is checked first: empty strings and strings longer than the configured
       maximum are rejected before any parse is attempted.
    2. Surrounding whitespace is ignored; the rest must be a plain decimal literal
       (optional sign, ASCII digits with an optional fraction, optional exponent).
       Hex literals, non-ASCII digits, `nan`, `inf` and digit-group underscores
       are rejected.
    3. Literals that overflow to infinity (`1e999`) are rejected.

Determinism:
    Pure functions; identical input always yields the same value or error.
"""

import math
import re

from areacheck.config import MAX_NUMERIC_LENGTH
from areacheck.core.errors import InvalidValue

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def validate_numeric_string(param, raw, max_length=MAX_NUMERIC_LENGTH):
    """Reject empty or oversized raw values before parsing."""
    if len(raw) < 1:
        raise InvalidValue(param, "Empty string provided, expected a number")

    if len(raw) > max_length:
        raise InvalidValue(
            param, f"Max allowed length is {max_length}. Got: {len(raw)}"
        )


def parse_number(param: str, raw: str, max_length: int = MAX_NUMERIC_LENGTH) -> float:
    """Parse `raw` into a finite float.

    Args:
        param: Parameter name, carried into any raised error.
        raw: Raw string value from the request.
        max_length: Maximum accepted length of `raw`.

    Raises:
        InvalidValue: length, syntax or finiteness check failed.
    """
    validate_numeric_string(param, raw, max_length)

    text = raw.strip()
    if not _DECIMAL_PATTERN.fullmatch(text):
        raise InvalidValue(param, f"Expected a decimal number. Got: {raw!r}")

    value = float(text)
    if not math.isfinite(value):
        raise InvalidValue(param, f"Value must be finite. Got: {raw!r}")

    return value


def check_range(param, lower, value, upper):
    """Raise `InvalidValue` unless `lower <= value <= upper` (both inclusive)."""
    if not (lower <= value <= upper):
        raise InvalidValue(
            param,
            f"Value not within range: should be higher or equal to {lower} "
            f"and lower or equal to {upper}. Got {value}",
        )

"""Scale quantization and coordinate normalization.

Quantization:
    An approximate scale snaps onto a legal value `t` when
    `t - tolerance <= value <= t + tolerance`. The table is searched in order and
    the first match wins. With the default legal set (spaced 0.5 apart) and a
    tolerance of 0.20 no two windows overlap, so the order never matters there.

Normalization:
    Coordinates are divided by the resolved scale. Legal scales are never zero,
    so no error path exists.
"""

from typing import Iterable

from areacheck.core.errors import InvalidValue


def quantize_scale(
    param: str, value: float, scale_table: Iterable[tuple[float, float]]
) -> float:
    """Return the first legal value whose tolerance window contains `value`.

    Args:
        param: Parameter name, carried into any raised error.
        value: Approximate scale parsed from the request.
        scale_table: `(legal_value, tolerance)` pairs.

    Raises:
        InvalidValue: no window contains `value`.
    """
    for target, tolerance in scale_table:
        tolerance = abs(tolerance)
        if target - tolerance <= value <= target + tolerance:
            return target

    raise InvalidValue(param, f"Value {value} is not in the set of legal scales")


def normalize(coordinate, scale):
    return coordinate / scale

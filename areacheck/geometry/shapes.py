"""
Geometric Shapes Module
=======================

Pure geometric primitives in normalized (scale-independent) space.

Design:
- Immutable shapes (frozen dataclass pattern)
- Boundaries count as inside
- Thread-safe by design (no mutable state)
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle given by two opposite corners."""

    x_min: float
    y_min: float
    x_max: float
    y_max: float

    def __post_init__(self):
        if self.x_min > self.x_max or self.y_min > self.y_max:
            raise ValueError(
                f"Rectangle corners out of order: ({self.x_min}, {self.y_min}) "
                f"/ ({self.x_max}, {self.y_max})"
            )

    def contains(self, x: float, y: float) -> bool:
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max


@dataclass(frozen=True)
class Triangle:
    """
    Triangle with point queries by edge cross products.

    A point is inside when it is on the same side of (or on) all three edges,
    which works for either vertex winding.
    """

    a: Tuple[float, float]
    b: Tuple[float, float]
    c: Tuple[float, float]

    def __post_init__(self):
        if _cross(self.a, self.b, self.c) == 0:
            raise ValueError("Triangle vertices must not be collinear")

    def contains(self, x: float, y: float) -> bool:
        p = (x, y)
        d1 = _cross(self.a, self.b, p)
        d2 = _cross(self.b, self.c, p)
        d3 = _cross(self.c, self.a, p)

        has_negative = d1 < 0 or d2 < 0 or d3 < 0
        has_positive = d1 > 0 or d2 > 0 or d3 > 0
        return not (has_negative and has_positive)


@dataclass(frozen=True)
class QuarterCircle:
    """
    Quarter disc centred at the origin.

    Attributes:
        radius: Disc radius
        quadrant: 1-4, counter-clockwise from (+x, +y)
    """

    radius: float
    quadrant: int

    def __post_init__(self):
        if self.radius <= 0:
            raise ValueError(f"radius must be positive, got {self.radius}")
        if self.quadrant not in (1, 2, 3, 4):
            raise ValueError(f"quadrant must be 1-4, got {self.quadrant}")

    def contains(self, x: float, y: float) -> bool:
        sign_x, sign_y = _QUADRANT_SIGNS[self.quadrant]
        if x * sign_x < 0 or y * sign_y < 0:
            return False
        return x * x + y * y <= self.radius * self.radius


_QUADRANT_SIGNS = {1: (1, 1), 2: (-1, 1), 3: (-1, -1), 4: (1, -1)}


def _cross(o, a, b):
    """Z component of (a - o) x (b - o)."""
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])

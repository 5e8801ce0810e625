"""Region predicate contract and the default region.

Contract:
    A region predicate is any object with `is_inside(point) -> bool`. It must be a
    pure, deterministic function of the point, free of side effects and safe to call
    from several threads without synchronization. The pipeline treats it as a black
    box: it never inspects how membership is decided.

Default region (normalized space, boundaries inside):
    - Quadrant II: rectangle -1 <= x <= 0, 0 <= y <= 0.5.
    - Quadrant I: triangle (0, 0), (0.5, 0), (0, 1).
    - Quadrant IV: quarter circle of radius 0.5.
    - Quadrant III: empty.
"""

from typing import Protocol, Sequence, runtime_checkable

from areacheck.core.types import ValidatedPoint
from areacheck.geometry.shapes import QuarterCircle, Rectangle, Triangle


@runtime_checkable
class RegionPredicate(Protocol):
    def is_inside(self, point: ValidatedPoint) -> bool:
        ...


class ShapeUnionRegion:
    """Region formed by the union of immutable shapes."""

    def __init__(self, shapes: Sequence):
        self._shapes = tuple(shapes)

    def is_inside(self, point: ValidatedPoint) -> bool:
        return any(shape.contains(point.x, point.y) for shape in self._shapes)


DEFAULT_REGION = ShapeUnionRegion(
    [
        Rectangle(x_min=-1.0, y_min=0.0, x_max=0.0, y_max=0.5),
        Triangle(a=(0.0, 0.0), b=(0.5, 0.0), c=(0.0, 1.0)),
        QuarterCircle(radius=0.5, quadrant=4),
    ]
)

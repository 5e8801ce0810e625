"""Data contracts shared by the pipeline, the history store and the adapters.

Both values are frozen dataclasses: a `ValidatedPoint` is only ever built from input
that has already passed validation, and a `CheckRecord` is never mutated once it has
been appended to a session history.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ValidatedPoint:
    """Point in normalized space plus the legal scale it was normalized by.

    Attributes:
        x: Raw `pointX` divided by `scale`.
        y: Raw `pointY` divided by `scale`.
        scale: Legal scale value resolved by the quantizer.
    """

    x: float
    y: float
    scale: float


@dataclass(frozen=True)
class CheckRecord:
    """Outcome of one successful pipeline run.

    Attributes:
        point: The normalized point that was checked.
        computed_at: Timezone-aware UTC creation time.
        duration_seconds: Whole seconds between pipeline start and predicate result.
        inside_region: Region predicate verdict.
    """

    point: ValidatedPoint
    computed_at: datetime
    duration_seconds: int
    inside_region: bool

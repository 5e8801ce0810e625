"""Request pipeline for point-in-region checks.

Pipeline stages (strictly sequential, no suspension points):
    1. Extract the first raw value of `pointX`, `pointY` and `scale`.
    2. Parse and range-check `pointX`, then `pointY`.
    3. Parse `scale` and snap it onto the legal scale table.
    4. Normalize both coordinates by the resolved scale.
    5. Ask the region predicate for membership.
    6. Append one `CheckRecord` to the session history.

Failure handling:
    Stages 1-4 raise `AreaCheckError` subclasses. A failure in any stage aborts the
    run before the predicate is called and before any history mutation, so no
    partial record is ever committed. Predicate exceptions are logged and
    re-raised unchanged; they are not part of the validation taxonomy.

Determinism:
    Validation and normalization are pure. Timestamps come from the injectable
    `clock`, defaulting to the UTC wall clock.
"""

import logging
from datetime import datetime, timezone

from areacheck.config import DEFAULT_RULES
from areacheck.core.errors import AreaCheckError
from areacheck.core.response import compose_response
from areacheck.core.types import CheckRecord, ValidatedPoint
from areacheck.geometry.region import DEFAULT_REGION, RegionPredicate
from areacheck.validation.numeric import check_range, parse_number
from areacheck.validation.params import get_first_param
from areacheck.validation.scale import normalize, quantize_scale

logger = logging.getLogger(__name__)


PARAM_POINT_X = "pointX"
PARAM_POINT_Y = "pointY"
PARAM_SCALE = "scale"


def utc_now():
    return datetime.now(timezone.utc)


def validate_point(params, rules=DEFAULT_RULES):
    """Turn a raw parameter bag into a normalized `ValidatedPoint`.

    Raises:
        ParamNotFound, ParamValueNotProvided, InvalidValue.
    """
    raw_x = get_first_param(params, PARAM_POINT_X)
    raw_y = get_first_param(params, PARAM_POINT_Y)
    raw_scale = get_first_param(params, PARAM_SCALE)

    x = parse_number(PARAM_POINT_X, raw_x, rules.max_length)
    check_range(PARAM_POINT_X, rules.x_bounds[0], x, rules.x_bounds[1])
    y = parse_number(PARAM_POINT_Y, raw_y, rules.max_length)
    check_range(PARAM_POINT_Y, rules.y_bounds[0], y, rules.y_bounds[1])

    approximate_scale = parse_number(PARAM_SCALE, raw_scale, rules.max_length)
    scale = quantize_scale(PARAM_SCALE, approximate_scale, rules.scale_table)

    return ValidatedPoint(x=normalize(x, scale), y=normalize(y, scale), scale=scale)


def run_check(
    params,
    session_id,
    store,
    region: RegionPredicate = DEFAULT_REGION,
    rules=DEFAULT_RULES,
    clock=utc_now,
):
    """Run the full pipeline for one request and record the outcome.

    Args:
        params: Raw parameter bag (name -> list of string values).
        session_id: Opaque session key owned by the transport layer.
        store: `SessionHistoryStore` holding per-session histories.
        region: Region predicate exposing `is_inside(point)`.
        rules: Validation table.
        clock: Callable returning a timezone-aware `datetime`.

    Returns:
        Tuple snapshot of the session history, oldest first, including the new record.
    """
    started_at = clock()

    try:
        point = validate_point(params, rules)
    except AreaCheckError as exc:
        logger.info(
            "Rejected check for session %s: %s (%s)", session_id, exc.kind, exc.param
        )
        raise

    try:
        inside = bool(region.is_inside(point))
    except Exception:
        logger.exception("Region predicate failed for point %r", point)
        raise

    finished_at = clock()
    duration = int(finished_at.timestamp()) - int(started_at.timestamp())

    record = CheckRecord(
        point=point,
        computed_at=finished_at,
        duration_seconds=duration,
        inside_region=inside,
    )
    history = store.append(session_id, record)

    logger.info(
        "Check for session %s: point=(%s, %s) scale=%s inside=%s history=%d",
        session_id,
        point.x,
        point.y,
        point.scale,
        inside,
        len(history),
    )
    return history


def process_check(params, session_id, store, **kwargs):
    """Run the pipeline and compose the session payload for the caller."""
    return compose_response(run_check(params, session_id, store, **kwargs))

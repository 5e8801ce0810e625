"""Outbound payload schema for a session's check history.

Wire shape (root-wrapped):
    {"userAreaData": {"areaDataList": [
        {"point": {"x", "y", "scale"}, "calculatedAt", "calculationTime", "result"},
        ...]}}

The list always holds the full session history, oldest first, not only the record
produced by the current request.
"""

from datetime import datetime
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from areacheck.core.types import CheckRecord


class PointPayload(BaseModel):
    x: float
    y: float
    scale: float


class AreaDataPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    point: PointPayload
    calculated_at: datetime = Field(alias="calculatedAt")
    calculation_time: int = Field(alias="calculationTime")
    result: bool


class UserAreaDataPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    area_data_list: list[AreaDataPayload] = Field(alias="areaDataList")


class AreaCheckResponse(BaseModel):
    """Root wrapper around the session payload."""

    model_config = ConfigDict(populate_by_name=True)

    user_area_data: UserAreaDataPayload = Field(alias="userAreaData")

    def to_wire(self):
        """Serialize to JSON-compatible primitives using the camelCase wire names."""
        return self.model_dump(by_alias=True, mode="json")


def _record_payload(record: CheckRecord) -> AreaDataPayload:
    return AreaDataPayload(
        point=PointPayload(
            x=record.point.x, y=record.point.y, scale=record.point.scale
        ),
        calculated_at=record.computed_at,
        calculation_time=record.duration_seconds,
        result=record.inside_region,
    )


def compose_response(history: Iterable[CheckRecord]) -> AreaCheckResponse:
    """Build the response payload from a history snapshot, preserving its order."""
    return AreaCheckResponse(
        user_area_data=UserAreaDataPayload(
            area_data_list=[_record_payload(record) for record in history]
        )
    )

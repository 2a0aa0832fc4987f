"""Departure and arrival domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from bvg_mcp.domain.models.line import Line, Remark, parse_remarks
from bvg_mcp.domain.models.location import Stop
from bvg_mcp.domain.models.timestamps import parse_timestamp


@dataclass(frozen=True)
class Departure:
    """A scheduled departure (or arrival) of a trip at a stop.

    ``when`` and ``planned_when`` are independently optional; ``None`` means
    the time is not known yet.
    """

    trip_id: str
    stop: Stop | None
    when: datetime | None
    planned_when: datetime | None
    delay_seconds: int | None
    platform: str | None
    planned_platform: str | None
    line: Line | None
    direction: str | None = None
    is_cancelled: bool = False
    remarks: list[Remark] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Departure":
        stop = data.get("stop")
        line = data.get("line")
        delay = data.get("delay")
        return cls(
            trip_id=str(data.get("tripId", "")),
            stop=Stop.from_api(stop) if isinstance(stop, dict) else None,
            when=parse_timestamp(data.get("when")),
            planned_when=parse_timestamp(data.get("plannedWhen")),
            delay_seconds=delay if isinstance(delay, int) else None,
            platform=data.get("platform"),
            planned_platform=data.get("plannedPlatform"),
            line=Line.from_api(line) if isinstance(line, dict) else None,
            # Arrivals carry "provenance" where departures carry "direction"
            direction=data.get("direction") or data.get("provenance"),
            is_cancelled=bool(data.get("cancelled", False)),
            remarks=parse_remarks(data.get("remarks")),
        )

    @property
    def is_platform_changed(self) -> bool:
        return (
            self.platform is not None
            and self.planned_platform is not None
            and self.platform != self.planned_platform
        )


Arrival = Departure

"""Trip domain model."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from bvg_mcp.domain.models.journey import Stopover, parse_stopovers
from bvg_mcp.domain.models.line import Line
from bvg_mcp.domain.models.location import Stop
from bvg_mcp.domain.models.timestamps import parse_timestamp


@dataclass(frozen=True)
class Trip:
    """A single vehicle run along a line."""

    id: str
    origin: Stop | None
    destination: Stop | None
    line: Line | None
    departure: datetime | None
    planned_departure: datetime | None
    arrival: datetime | None
    planned_arrival: datetime | None
    direction: str | None = None
    stopovers: list[Stopover] | None = None
    polyline: dict[str, Any] | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Trip":
        origin = data.get("origin")
        destination = data.get("destination")
        line = data.get("line")
        return cls(
            id=str(data.get("id", "")),
            origin=Stop.from_api(origin) if isinstance(origin, dict) else None,
            destination=Stop.from_api(destination) if isinstance(destination, dict) else None,
            line=Line.from_api(line) if isinstance(line, dict) else None,
            departure=parse_timestamp(data.get("departure")),
            planned_departure=parse_timestamp(data.get("plannedDeparture")),
            arrival=parse_timestamp(data.get("arrival")),
            planned_arrival=parse_timestamp(data.get("plannedArrival")),
            direction=data.get("direction"),
            stopovers=parse_stopovers(data.get("stopovers")),
            polyline=data.get("polyline"),
        )

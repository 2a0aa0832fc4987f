"""Radar (live vehicle positions) domain model."""

from dataclasses import dataclass
from typing import Any

from bvg_mcp.domain.models.line import Line


@dataclass(frozen=True)
class RadarMovement:
    """Position of one vehicle at the time of the snapshot."""

    trip_id: str
    line: Line | None
    direction: str | None
    latitude: float | None
    longitude: float | None
    delay_seconds: int | None = None


@dataclass(frozen=True)
class RadarResult:
    movements: list[RadarMovement]

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "RadarResult":
        """Decode either the ``movements`` list or a GeoJSON ``features`` collection."""
        movements = data.get("movements")
        if isinstance(movements, list):
            return cls(movements=[_from_movement(m) for m in movements if isinstance(m, dict)])
        features = data.get("features")
        if isinstance(features, list):
            return cls(movements=[_from_feature(f) for f in features if isinstance(f, dict)])
        return cls(movements=[])


def _line(data: Any) -> Line | None:
    return Line.from_api(data) if isinstance(data, dict) else None


def _from_movement(data: dict[str, Any]) -> RadarMovement:
    location = data.get("location") or {}
    return RadarMovement(
        trip_id=str(data.get("tripId", "")),
        line=_line(data.get("line")),
        direction=data.get("direction"),
        latitude=location.get("latitude"),
        longitude=location.get("longitude"),
        delay_seconds=data.get("delay"),
    )


def _from_feature(data: dict[str, Any]) -> RadarMovement:
    properties = data.get("properties") or {}
    coordinates = (data.get("geometry") or {}).get("coordinates") or [None, None]
    # GeoJSON points are [longitude, latitude]
    return RadarMovement(
        trip_id=str(properties.get("tripId", "")),
        line=_line(properties.get("line")),
        direction=properties.get("direction"),
        latitude=coordinates[1],
        longitude=coordinates[0],
        delay_seconds=properties.get("delay"),
    )

"""Validators for free-form tool inputs (coordinates, stop and trip IDs)."""

import re
from dataclasses import dataclass

from bvg_mcp.domain.errors import ValidationError

_COORDINATES_PATTERN = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*,\s*(-?\d+(?:\.\d+)?)\s*$")


@dataclass(frozen=True)
class Coordinates:
    """A WGS84 latitude/longitude pair."""

    latitude: float
    longitude: float


def parse_coordinates(text: str) -> Coordinates:
    """Parse a ``"<lat>,<lon>"`` string such as ``"52.5200,13.4050"``.

    Raises:
        ValidationError: If the string is malformed or out of range.
    """
    match = _COORDINATES_PATTERN.match(text) if isinstance(text, str) else None
    if match is None:
        raise ValidationError(
            'Invalid coordinates format. Expected "latitude,longitude"',
            fields=("coordinates",),
        )

    latitude = float(match.group(1))
    longitude = float(match.group(2))

    if not -90 <= latitude <= 90:
        raise ValidationError("Latitude must be between -90 and 90", fields=("coordinates",))
    if not -180 <= longitude <= 180:
        raise ValidationError("Longitude must be between -180 and 180", fields=("coordinates",))

    return Coordinates(latitude=latitude, longitude=longitude)


def validate_stop_id(stop_id: str) -> str:
    """Check that a stop (or trip) identifier is a non-empty string.

    The upstream service is authoritative for identifier formats, so no
    further checks are made here.
    """
    if not isinstance(stop_id, str) or not stop_id:
        raise ValidationError("Invalid stop ID provided", fields=("stopId",))
    return stop_id

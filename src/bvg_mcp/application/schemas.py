"""Parameter models for every tool.

Each model is the single source of truth for a tool's input contract: the
dispatcher validates raw arguments against it and the discovery schema
advertised to MCP hosts is generated from it. Field names are snake_case in
Python and camelCase on the wire, matching the upstream API's query names.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from bvg_mcp.domain.validators import parse_coordinates, validate_stop_id

Language = Literal["de", "en"]
WalkingSpeed = Literal["slow", "normal", "fast"]
Accessibility = Literal["partial", "complete"]

_STOP_ID_DESCRIPTION = (
    "Unique identifier of the stop (not the station name - use locations_search "
    "to find stop IDs by station name)"
)
_PLACE_DESCRIPTION = (
    "{role} location (stop ID, address, or coordinates - use locations_search "
    "to find stop IDs by station name)"
)


def _language() -> Any:
    return Field(default="en", description="Language for results")


class ToolParams(BaseModel):
    """Base for tool parameter sets: strict types, no unknown fields, camelCase wire names."""

    model_config = ConfigDict(
        extra="forbid",
        strict=True,
        frozen=True,
        alias_generator=to_camel,
    )

    def to_query(self, *, exclude: set[str] | None = None) -> dict[str, Any]:
        """Wire-named query parameters, leaving out fields that were not supplied."""
        return self.model_dump(by_alias=True, exclude=exclude, exclude_none=True)


class LocationsSearchParams(ToolParams):
    query: str = Field(
        min_length=1, description="Search query for locations (stops, addresses, POIs)"
    )
    results: int = Field(
        default=10, ge=1, le=100, description="Maximum number of results to return"
    )
    addresses: bool = Field(default=True, description="Include addresses in search")
    poi: bool = Field(default=True, description="Include points of interest in search")
    lines_of_stops: bool = Field(
        default=False, description="Include lines that serve returned stops"
    )
    language: Language = _language()


class NearbyLocationsParams(ToolParams):
    coordinates: str = Field(
        description='Coordinates in "latitude,longitude" format (e.g., "52.5200,13.4050")'
    )
    results: int = Field(
        default=8, ge=1, le=100, description="Maximum number of results to return"
    )
    distance: int = Field(default=1000, ge=1, le=10000, description="Search radius in meters")
    stops: bool = Field(default=True, description="Include stops in search")
    poi: bool = Field(default=False, description="Include points of interest in search")
    lines_of_stops: bool = Field(
        default=False, description="Include lines that serve returned stops"
    )
    language: Language = _language()

    @field_validator("coordinates")
    @classmethod
    def check_coordinates(cls, v: str) -> str:
        parse_coordinates(v)
        return v


class StopDetailsParams(ToolParams):
    stop_id: str = Field(min_length=1, description=_STOP_ID_DESCRIPTION)
    lines_of_stops: bool = Field(default=False, description="Include lines that serve this stop")
    language: Language = _language()

    @field_validator("stop_id")
    @classmethod
    def check_stop_id(cls, v: str) -> str:
        return validate_stop_id(v)


class StopDeparturesParams(ToolParams):
    """Shared by the departures and arrivals tools."""

    stop_id: str = Field(min_length=1, description=_STOP_ID_DESCRIPTION)
    when: str | None = Field(
        default=None, min_length=1, description="Date and time in ISO format (default: now)"
    )
    duration: int = Field(
        default=120, ge=1, le=1440, description="Show departures for the next n minutes"
    )
    results: int = Field(default=10, ge=1, le=100, description="Maximum number of results")
    lines_of_stops: bool = Field(default=False, description="Include lines that serve this stop")
    remarks: bool = Field(default=True, description="Include remarks and alerts")
    language: Language = _language()

    @field_validator("stop_id")
    @classmethod
    def check_stop_id(cls, v: str) -> str:
        return validate_stop_id(v)


StopArrivalsParams = StopDeparturesParams


class JourneyPlanParams(ToolParams):
    from_: str = Field(
        alias="from", min_length=1, description=_PLACE_DESCRIPTION.format(role="Origin")
    )
    to: str = Field(min_length=1, description=_PLACE_DESCRIPTION.format(role="Destination"))
    via: str | None = Field(
        default=None, min_length=1, description=_PLACE_DESCRIPTION.format(role="Via")
    )
    departure: str | None = Field(
        default=None, min_length=1, description="Departure time in ISO format (default: now)"
    )
    arrival: str | None = Field(
        default=None,
        min_length=1,
        description="Arrival time in ISO format (alternative to departure)",
    )
    results: int = Field(default=3, ge=1, le=6, description="Number of journey alternatives")
    stopovers: bool = Field(default=False, description="Include stopovers for each journey leg")
    transfers: int = Field(
        default=-1, ge=-1, le=10, description="Maximum number of transfers (-1 for unlimited)"
    )
    transfer_time: int = Field(
        default=0, ge=0, le=60, description="Minimum transfer time in minutes"
    )
    accessibility: Accessibility | None = Field(
        default=None, description="Accessibility requirements"
    )
    bike: bool = Field(default=False, description="Allow taking a bike")
    walking_speed: WalkingSpeed = Field(default="normal", description="Walking speed preference")
    start_with_walking: bool = Field(default=True, description="Allow walking to first stop")
    end_with_walking: bool = Field(default=True, description="Allow walking from last stop")
    language: Language = _language()

    @field_validator("arrival")
    @classmethod
    def validate_single_time_constraint(cls, v: str | None, info: ValidationInfo) -> str | None:
        """departure and arrival are alternatives; the planner cannot honour both."""
        if v is not None and info.data.get("departure") is not None:
            raise ValueError("Cannot specify both departure and arrival time. Choose one.")
        return v


class TripDetailsParams(ToolParams):
    trip_id: str = Field(min_length=1, description="Unique identifier of the trip")
    line_name: str | None = Field(
        default=None, min_length=1, description="Line name for additional context"
    )
    stopovers: bool = Field(default=True, description="Include stopovers for the trip")
    polyline: bool = Field(default=False, description="Include geographic polyline")
    language: Language = _language()

    @field_validator("trip_id")
    @classmethod
    def check_trip_id(cls, v: str) -> str:
        return validate_stop_id(v)


class RadarParams(ToolParams):
    north: float = Field(ge=-90, le=90, description="Northern boundary latitude")
    west: float = Field(ge=-180, le=180, description="Western boundary longitude")
    south: float = Field(ge=-90, le=90, description="Southern boundary latitude")
    east: float = Field(ge=-180, le=180, description="Eastern boundary longitude")
    results: int = Field(
        default=256, ge=1, le=256, description="Maximum number of vehicles to return"
    )
    duration: int = Field(
        default=30, ge=1, le=30, description="Compute frames for the next n seconds"
    )
    frames: int = Field(default=3, ge=1, le=20, description="Number of frames to compute")
    polylines: bool = Field(default=True, description="Include polylines for vehicle movements")
    language: Language = _language()

    @field_validator("south")
    @classmethod
    def validate_latitude_order(cls, v: float, info: ValidationInfo) -> float:
        north = info.data.get("north")
        if north is not None and north <= v:
            raise ValueError("Northern boundary must be greater than southern boundary")
        return v

    @field_validator("east")
    @classmethod
    def validate_longitude_order(cls, v: float, info: ValidationInfo) -> float:
        west = info.data.get("west")
        if west is not None and v <= west:
            raise ValueError("Eastern boundary must be greater than western boundary")
        return v

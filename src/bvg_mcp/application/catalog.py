"""Static catalog of the tools this server exposes."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from bvg_mcp.application import handlers
from bvg_mcp.application.discovery import to_discovery_schema
from bvg_mcp.application.schemas import (
    JourneyPlanParams,
    LocationsSearchParams,
    NearbyLocationsParams,
    RadarParams,
    StopArrivalsParams,
    StopDeparturesParams,
    StopDetailsParams,
    TripDetailsParams,
)
from bvg_mcp.domain.ports.transit_api import TransitApi

ToolHandler = Callable[[TransitApi, Any], Awaitable[Any]]


@dataclass(frozen=True)
class ToolDefinition:
    """A named tool: its description, parameter model and handler."""

    name: str
    description: str
    params_model: type[BaseModel]
    handler: ToolHandler

    def input_schema(self) -> dict[str, Any]:
        return to_discovery_schema(self.params_model)

    def to_mcp(self) -> dict[str, Any]:
        """Shape used in the MCP ``tools/list`` result."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


TOOL_CATALOG: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="locations_search",
        description=(
            "Search for stops, addresses, and points of interest in Berlin using the BVG API. "
            "Use this tool to find stop IDs by station name for other tools that require "
            "stopId parameters."
        ),
        params_model=LocationsSearchParams,
        handler=handlers.search_locations,
    ),
    ToolDefinition(
        name="locations_nearby",
        description="Find nearby stops and points of interest by coordinates in Berlin",
        params_model=NearbyLocationsParams,
        handler=handlers.nearby_locations,
    ),
    ToolDefinition(
        name="stop_details",
        description="Get detailed information about a specific stop or station",
        params_model=StopDetailsParams,
        handler=handlers.stop_details,
    ),
    ToolDefinition(
        name="stop_departures",
        description="Get upcoming departures at a specific stop or station",
        params_model=StopDeparturesParams,
        handler=handlers.stop_departures,
    ),
    ToolDefinition(
        name="stop_arrivals",
        description="Get upcoming arrivals at a specific stop or station",
        params_model=StopArrivalsParams,
        handler=handlers.stop_arrivals,
    ),
    ToolDefinition(
        name="journey_plan",
        description=(
            "Plan journeys from A to B using Berlin public transport. "
            "Specify either a departure or an arrival time, not both."
        ),
        params_model=JourneyPlanParams,
        handler=handlers.plan_journey,
    ),
    ToolDefinition(
        name="trip_details",
        description="Get detailed information about a specific trip by ID",
        params_model=TripDetailsParams,
        handler=handlers.trip_details,
    ),
    ToolDefinition(
        name="radar",
        description=(
            "Find vehicles in a geographic area with movement data. "
            "north must be greater than south and east greater than west."
        ),
        params_model=RadarParams,
        handler=handlers.radar,
    ),
)

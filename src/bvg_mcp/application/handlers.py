"""Tool handlers.

Every handler receives the transit API port and an already validated
parameter model, translates the parameters into one upstream GET request and
unwraps the relevant part of the response. Lower-layer failures are re-raised
as ToolExecutionError with a prefix naming the failed operation.
"""

import logging
from typing import Any
from urllib.parse import quote

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
from bvg_mcp.domain.errors import BvgMcpError, ToolExecutionError
from bvg_mcp.domain.ports.transit_api import QueryParams, TransitApi
from bvg_mcp.domain.validators import parse_coordinates

logger = logging.getLogger(__name__)


def encode_path_segment(value: str) -> str:
    """Percent-encode an identifier for use as a single URL path segment."""
    return quote(value, safe="")


async def _fetch(api: TransitApi, endpoint: str, query: QueryParams, failure: str) -> Any:
    try:
        return await api.get(endpoint, query)
    except BvgMcpError as e:
        logger.warning(f"{failure}: {e}")
        raise ToolExecutionError(f"{failure}: {e}") from e


def _unwrap_list(data: Any, key: str, failure: str) -> list[Any]:
    """Extract ``data[key]``; a bare list is passed through, a missing key means none.

    Raises:
        ToolExecutionError: If the body has any other shape.
    """
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        items = data.get(key, [])
        if isinstance(items, list):
            return items
        logger.warning(f"{failure}: unexpected {key!r} value {items!r:.200}")
        raise ToolExecutionError(f"{failure}: unexpected {key!r} in response")
    logger.warning(f"{failure}: unexpected response body {data!r:.200}")
    raise ToolExecutionError(f"{failure}: unexpected response body")


async def search_locations(api: TransitApi, params: LocationsSearchParams) -> Any:
    """GET /locations"""
    return await _fetch(api, "/locations", params.to_query(), "Failed to search locations")


async def nearby_locations(api: TransitApi, params: NearbyLocationsParams) -> Any:
    """GET /locations/nearby"""
    coordinates = parse_coordinates(params.coordinates)
    query: QueryParams = {
        "latitude": coordinates.latitude,
        "longitude": coordinates.longitude,
        **params.to_query(exclude={"coordinates"}),
    }
    return await _fetch(api, "/locations/nearby", query, "Failed to find nearby locations")


async def stop_details(api: TransitApi, params: StopDetailsParams) -> Any:
    """GET /stops/{id}"""
    endpoint = f"/stops/{encode_path_segment(params.stop_id)}"
    return await _fetch(
        api, endpoint, params.to_query(exclude={"stop_id"}), "Failed to get stop details"
    )


async def stop_departures(api: TransitApi, params: StopDeparturesParams) -> list[Any]:
    """GET /stops/{id}/departures"""
    endpoint = f"/stops/{encode_path_segment(params.stop_id)}/departures"
    failure = "Failed to get stop departures"
    data = await _fetch(api, endpoint, params.to_query(exclude={"stop_id"}), failure)
    return _unwrap_list(data, "departures", failure)


async def stop_arrivals(api: TransitApi, params: StopArrivalsParams) -> list[Any]:
    """GET /stops/{id}/arrivals"""
    endpoint = f"/stops/{encode_path_segment(params.stop_id)}/arrivals"
    failure = "Failed to get stop arrivals"
    data = await _fetch(api, endpoint, params.to_query(exclude={"stop_id"}), failure)
    return _unwrap_list(data, "arrivals", failure)


async def plan_journey(api: TransitApi, params: JourneyPlanParams) -> list[Any]:
    """GET /journeys

    ``departure`` and ``arrival`` are only sent when supplied; the parameter
    model guarantees at most one of them is set.
    """
    failure = "Failed to plan journey"
    data = await _fetch(api, "/journeys", params.to_query(), failure)
    return _unwrap_list(data, "journeys", failure)


async def trip_details(api: TransitApi, params: TripDetailsParams) -> Any:
    """GET /trips/{id}"""
    endpoint = f"/trips/{encode_path_segment(params.trip_id)}"
    data = await _fetch(
        api, endpoint, params.to_query(exclude={"trip_id"}), "Failed to get trip details"
    )
    if isinstance(data, dict):
        return data.get("trip")
    return None


async def radar(api: TransitApi, params: RadarParams) -> Any:
    """GET /radar"""
    return await _fetch(api, "/radar", params.to_query(), "Failed to execute radar search")

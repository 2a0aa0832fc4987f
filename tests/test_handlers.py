"""Tests for tool handlers."""

from typing import Any

import pytest

from bvg_mcp.application import handlers
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
from bvg_mcp.domain.errors import (
    NetworkFailure,
    ToolExecutionError,
    TransportError,
    UpstreamError,
)
from bvg_mcp.domain.ports.transit_api import QueryParams


class FakeTransitApi:
    """Transit API double that records requests and returns a canned response."""

    def __init__(self, response: Any = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[tuple[str, QueryParams | None]] = []

    async def get(self, endpoint: str, params: QueryParams | None = None) -> Any:
        self.calls.append((endpoint, params))
        if self.error is not None:
            raise self.error
        return self.response


class TestSearchLocations:
    """Tests for the locations search handler."""

    @pytest.mark.asyncio
    async def test_passes_response_through(self) -> None:
        """Given a list from upstream, when searching, then it is returned unmodified."""
        locations = [{"type": "stop", "id": "900100003", "name": "S+U Alexanderplatz"}]
        api = FakeTransitApi(response=locations)

        result = await handlers.search_locations(
            api, LocationsSearchParams.model_validate({"query": "Alexanderplatz"})
        )

        assert result == locations
        endpoint, query = api.calls[0]
        assert endpoint == "/locations"
        assert query["query"] == "Alexanderplatz"
        assert query["results"] == 10
        assert query["linesOfStops"] is False

    @pytest.mark.asyncio
    async def test_when_upstream_error_then_prefixed(self) -> None:
        api = FakeTransitApi(error=UpstreamError("no results"))

        with pytest.raises(ToolExecutionError) as exc_info:
            await handlers.search_locations(
                api, LocationsSearchParams.model_validate({"query": "xyz"})
            )

        assert str(exc_info.value) == "Failed to search locations: BVG API error: no results"
        assert isinstance(exc_info.value.__cause__, UpstreamError)


class TestNearbyLocations:
    """Tests for the nearby locations handler."""

    @pytest.mark.asyncio
    async def test_splits_coordinates_into_latitude_and_longitude(self) -> None:
        api = FakeTransitApi(response=[])

        await handlers.nearby_locations(
            api,
            NearbyLocationsParams.model_validate(
                {"coordinates": "52.5162,13.3777", "distance": 500}
            ),
        )

        endpoint, query = api.calls[0]
        assert endpoint == "/locations/nearby"
        assert query["latitude"] == 52.5162
        assert query["longitude"] == 13.3777
        assert query["distance"] == 500
        assert "coordinates" not in query

    @pytest.mark.asyncio
    async def test_when_network_failure_then_prefixed(self) -> None:
        api = FakeTransitApi(error=NetworkFailure("Connection refused"))

        with pytest.raises(
            ToolExecutionError, match="^Failed to find nearby locations: Network failure"
        ):
            await handlers.nearby_locations(
                api, NearbyLocationsParams.model_validate({"coordinates": "52.5,13.4"})
            )


class TestStopHandlers:
    """Tests for the stop details, departures and arrivals handlers."""

    @pytest.mark.asyncio
    async def test_stop_details_encodes_stop_id(self) -> None:
        api = FakeTransitApi(response={"type": "stop", "id": "a/b"})

        result = await handlers.stop_details(
            api, StopDetailsParams.model_validate({"stopId": "a/b"})
        )

        assert result == {"type": "stop", "id": "a/b"}
        endpoint, query = api.calls[0]
        assert endpoint == "/stops/a%2Fb"
        assert "stopId" not in query

    @pytest.mark.asyncio
    async def test_departures_unwrapped(self) -> None:
        """Given {departures: [A, B]}, when fetching departures, then [A, B] is returned."""
        first = {"tripId": "1", "line": {"name": "U2"}}
        second = {"tripId": "2", "line": {"name": "M4"}}
        api = FakeTransitApi(response={"departures": [first, second], "realtimeDataUpdatedAt": 1})

        result = await handlers.stop_departures(
            api, StopDeparturesParams.model_validate({"stopId": "900100003"})
        )

        assert result == [first, second]
        endpoint, query = api.calls[0]
        assert endpoint == "/stops/900100003/departures"
        assert query["duration"] == 120
        assert query["remarks"] is True

    @pytest.mark.asyncio
    async def test_departures_when_key_missing_then_empty(self) -> None:
        api = FakeTransitApi(response={})

        result = await handlers.stop_departures(
            api, StopDeparturesParams.model_validate({"stopId": "900100003"})
        )

        assert result == []

    @pytest.mark.asyncio
    async def test_departures_when_bare_list_then_passed_through(self) -> None:
        api = FakeTransitApi(response=[{"tripId": "1"}])

        result = await handlers.stop_departures(
            api, StopDeparturesParams.model_validate({"stopId": "900100003"})
        )

        assert result == [{"tripId": "1"}]

    @pytest.mark.asyncio
    async def test_arrivals_unwrapped(self) -> None:
        arrival = {"tripId": "1", "provenance": "S Spandau"}
        api = FakeTransitApi(response={"arrivals": [arrival]})

        result = await handlers.stop_arrivals(
            api,
            StopArrivalsParams.model_validate(
                {"stopId": "900100003", "when": "2024-05-01T08:00:00+02:00"}
            ),
        )

        assert result == [arrival]
        endpoint, query = api.calls[0]
        assert endpoint == "/stops/900100003/arrivals"
        assert query["when"] == "2024-05-01T08:00:00+02:00"

    @pytest.mark.asyncio
    async def test_departures_when_field_is_null_then_fails(self) -> None:
        """Given {departures: null}, when fetching departures, then it is not taken as empty."""
        api = FakeTransitApi(response={"departures": None})

        with pytest.raises(ToolExecutionError) as exc_info:
            await handlers.stop_departures(
                api, StopDeparturesParams.model_validate({"stopId": "900100003"})
            )

        assert str(exc_info.value) == (
            "Failed to get stop departures: unexpected 'departures' in response"
        )

    @pytest.mark.asyncio
    async def test_journeys_when_body_is_not_an_object_then_fails(self) -> None:
        api = FakeTransitApi(response="no journeys")

        with pytest.raises(
            ToolExecutionError, match="^Failed to plan journey: unexpected response body"
        ):
            await handlers.plan_journey(
                api, JourneyPlanParams.model_validate({"from": "a", "to": "b"})
            )

    @pytest.mark.asyncio
    async def test_arrivals_error_prefix(self) -> None:
        api = FakeTransitApi(error=TransportError(503))

        with pytest.raises(ToolExecutionError) as exc_info:
            await handlers.stop_arrivals(
                api, StopArrivalsParams.model_validate({"stopId": "900100003"})
            )

        assert str(exc_info.value) == "Failed to get stop arrivals: HTTP error! status: 503"


class TestPlanJourney:
    """Tests for the journey planning handler."""

    @pytest.mark.asyncio
    async def test_journeys_unwrapped_and_times_omitted(self) -> None:
        journey = {"type": "journey", "legs": []}
        api = FakeTransitApi(response={"journeys": [journey], "earlierRef": "x"})

        result = await handlers.plan_journey(
            api, JourneyPlanParams.model_validate({"from": "900100003", "to": "900023201"})
        )

        assert result == [journey]
        endpoint, query = api.calls[0]
        assert endpoint == "/journeys"
        assert query["from"] == "900100003"
        assert query["to"] == "900023201"
        assert "departure" not in query
        assert "arrival" not in query

    @pytest.mark.asyncio
    async def test_departure_forwarded_when_given(self) -> None:
        api = FakeTransitApi(response={"journeys": []})

        await handlers.plan_journey(
            api,
            JourneyPlanParams.model_validate(
                {"from": "a", "to": "b", "departure": "2024-05-01T08:00:00+02:00"}
            ),
        )

        _, query = api.calls[0]
        assert query["departure"] == "2024-05-01T08:00:00+02:00"
        assert "arrival" not in query

    @pytest.mark.asyncio
    async def test_upstream_error_prefix(self) -> None:
        api = FakeTransitApi(error=UpstreamError("no results"))

        with pytest.raises(ToolExecutionError) as exc_info:
            await handlers.plan_journey(
                api, JourneyPlanParams.model_validate({"from": "a", "to": "b"})
            )

        assert str(exc_info.value) == "Failed to plan journey: BVG API error: no results"


class TestTripDetails:
    """Tests for the trip details handler."""

    @pytest.mark.asyncio
    async def test_trip_unwrapped_and_id_encoded(self) -> None:
        trip = {"id": "1|62341|0|86|1052024", "line": {"name": "U2"}}
        api = FakeTransitApi(response={"trip": trip})

        result = await handlers.trip_details(
            api, TripDetailsParams.model_validate({"tripId": "1|62341|0|86|1052024"})
        )

        assert result == trip
        endpoint, query = api.calls[0]
        assert endpoint == "/trips/1%7C62341%7C0%7C86%7C1052024"
        assert query["stopovers"] is True
        assert "tripId" not in query

    @pytest.mark.asyncio
    async def test_when_trip_missing_then_none(self) -> None:
        api = FakeTransitApi(response={})

        result = await handlers.trip_details(api, TripDetailsParams.model_validate({"tripId": "x"}))

        assert result is None


class TestRadar:
    """Tests for the radar handler."""

    @pytest.mark.asyncio
    async def test_passes_bounding_box(self) -> None:
        movements = {"movements": [{"tripId": "1"}]}
        api = FakeTransitApi(response=movements)

        result = await handlers.radar(
            api,
            RadarParams.model_validate(
                {"north": 52.52, "west": 13.36, "south": 52.5, "east": 13.43}
            ),
        )

        assert result == movements
        endpoint, query = api.calls[0]
        assert endpoint == "/radar"
        assert query["north"] == 52.52
        assert query["frames"] == 3

    @pytest.mark.asyncio
    async def test_error_prefix(self) -> None:
        api = FakeTransitApi(error=TransportError(500, "Internal Server Error"))

        with pytest.raises(ToolExecutionError, match="^Failed to execute radar search: HTTP"):
            await handlers.radar(
                api,
                RadarParams.model_validate(
                    {"north": 52.52, "west": 13.36, "south": 52.5, "east": 13.43}
                ),
            )


def test_encode_path_segment_escapes_reserved_characters() -> None:
    assert handlers.encode_path_segment("a b/c?d") == "a%20b%2Fc%3Fd"
    assert handlers.encode_path_segment("900100003") == "900100003"

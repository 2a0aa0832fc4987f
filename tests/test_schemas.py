"""Tests for the tool parameter models."""

import pydantic
import pytest

from bvg_mcp.application.schemas import (
    JourneyPlanParams,
    LocationsSearchParams,
    NearbyLocationsParams,
    RadarParams,
    StopDeparturesParams,
    StopDetailsParams,
    TripDetailsParams,
)


def _error_locs(exc_info: pytest.ExceptionInfo[pydantic.ValidationError]) -> list[tuple]:
    return [tuple(error["loc"]) for error in exc_info.value.errors()]


class TestLocationsSearchParams:
    """Tests for LocationsSearchParams."""

    def test_when_only_query_then_defaults_applied(self) -> None:
        """Given only a query, when validating, then documented defaults are filled in."""
        params = LocationsSearchParams.model_validate({"query": "Alexanderplatz"})

        assert params.results == 10
        assert params.addresses is True
        assert params.poi is True
        assert params.lines_of_stops is False
        assert params.language == "en"

    def test_when_query_empty_then_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError) as exc_info:
            LocationsSearchParams.model_validate({"query": ""})

        assert ("query",) in _error_locs(exc_info)

    def test_when_query_missing_then_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError) as exc_info:
            LocationsSearchParams.model_validate({})

        assert ("query",) in _error_locs(exc_info)

    def test_when_unknown_field_then_rejected(self) -> None:
        """Given an undeclared field, when validating, then it is rejected, not ignored."""
        with pytest.raises(pydantic.ValidationError) as exc_info:
            LocationsSearchParams.model_validate({"query": "x", "limit": 5})

        assert ("limit",) in _error_locs(exc_info)

    @pytest.mark.parametrize("results", [0, 101])
    def test_when_results_out_of_bounds_then_rejected(self, results: int) -> None:
        with pytest.raises(pydantic.ValidationError):
            LocationsSearchParams.model_validate({"query": "x", "results": results})

    @pytest.mark.parametrize("results", [1, 100])
    def test_when_results_on_bounds_then_accepted(self, results: int) -> None:
        params = LocationsSearchParams.model_validate({"query": "x", "results": results})

        assert params.results == results

    def test_when_string_for_integer_then_rejected(self) -> None:
        """Given "5" for an integer field, when validating, then no coercion happens."""
        with pytest.raises(pydantic.ValidationError):
            LocationsSearchParams.model_validate({"query": "x", "results": "5"})

    def test_when_string_for_boolean_then_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            LocationsSearchParams.model_validate({"query": "x", "poi": "false"})

    def test_when_language_not_in_enum_then_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            LocationsSearchParams.model_validate({"query": "x", "language": "fr"})

    def test_snake_case_name_is_not_accepted_on_the_wire(self) -> None:
        """Given lines_of_stops instead of linesOfStops, when validating, then rejected."""
        with pytest.raises(pydantic.ValidationError):
            LocationsSearchParams.model_validate({"query": "x", "lines_of_stops": True})

    def test_to_query_uses_wire_names(self) -> None:
        params = LocationsSearchParams.model_validate({"query": "x", "linesOfStops": True})

        assert params.to_query() == {
            "query": "x",
            "results": 10,
            "addresses": True,
            "poi": True,
            "linesOfStops": True,
            "language": "en",
        }


class TestNearbyLocationsParams:
    """Tests for NearbyLocationsParams."""

    def test_when_valid_then_defaults_applied(self) -> None:
        params = NearbyLocationsParams.model_validate({"coordinates": "52.5162,13.3777"})

        assert params.results == 8
        assert params.distance == 1000
        assert params.stops is True
        assert params.poi is False

    def test_when_coordinates_malformed_then_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError) as exc_info:
            NearbyLocationsParams.model_validate({"coordinates": "Brandenburger Tor"})

        assert _error_locs(exc_info) == [("coordinates",)]
        assert "Invalid coordinates format" in str(exc_info.value)

    def test_when_latitude_out_of_range_then_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError, match="Latitude must be between"):
            NearbyLocationsParams.model_validate({"coordinates": "95,13"})

    @pytest.mark.parametrize("distance", [0, 10001])
    def test_when_distance_out_of_bounds_then_rejected(self, distance: int) -> None:
        with pytest.raises(pydantic.ValidationError):
            NearbyLocationsParams.model_validate(
                {"coordinates": "52.5,13.4", "distance": distance}
            )


class TestStopParams:
    """Tests for the stop details and departures parameter models."""

    def test_stop_details_requires_stop_id(self) -> None:
        with pytest.raises(pydantic.ValidationError) as exc_info:
            StopDetailsParams.model_validate({})

        assert ("stopId",) in _error_locs(exc_info)

    def test_stop_details_rejects_empty_stop_id(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            StopDetailsParams.model_validate({"stopId": ""})

    def test_departures_defaults(self) -> None:
        params = StopDeparturesParams.model_validate({"stopId": "900100003"})

        assert params.duration == 120
        assert params.results == 10
        assert params.remarks is True
        assert params.when is None

    def test_departures_duration_upper_bound(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            StopDeparturesParams.model_validate({"stopId": "900100003", "duration": 1441})

    def test_departures_query_omits_absent_when(self) -> None:
        params = StopDeparturesParams.model_validate({"stopId": "900100003"})

        query = params.to_query(exclude={"stop_id"})

        assert "when" not in query
        assert "stopId" not in query
        assert query["duration"] == 120


class TestJourneyPlanParams:
    """Tests for JourneyPlanParams."""

    def test_when_valid_then_defaults_applied(self) -> None:
        params = JourneyPlanParams.model_validate({"from": "900100003", "to": "900023201"})

        assert params.from_ == "900100003"
        assert params.results == 3
        assert params.transfers == -1
        assert params.transfer_time == 0
        assert params.walking_speed == "normal"
        assert params.start_with_walking is True
        assert params.end_with_walking is True
        assert params.accessibility is None

    def test_when_both_departure_and_arrival_then_rejected_at_arrival(self) -> None:
        """Given departure and arrival, when validating, then arrival carries the error."""
        with pytest.raises(pydantic.ValidationError) as exc_info:
            JourneyPlanParams.model_validate(
                {
                    "from": "900100003",
                    "to": "900023201",
                    "departure": "2024-05-01T08:00:00+02:00",
                    "arrival": "2024-05-01T09:00:00+02:00",
                }
            )

        assert _error_locs(exc_info) == [("arrival",)]
        assert "Cannot specify both departure and arrival time" in str(exc_info.value)

    def test_when_only_arrival_then_accepted(self) -> None:
        params = JourneyPlanParams.model_validate(
            {"from": "a", "to": "b", "arrival": "2024-05-01T09:00:00+02:00"}
        )

        assert params.arrival == "2024-05-01T09:00:00+02:00"
        assert params.departure is None

    @pytest.mark.parametrize("results", [0, 7])
    def test_when_results_out_of_bounds_then_rejected(self, results: int) -> None:
        with pytest.raises(pydantic.ValidationError):
            JourneyPlanParams.model_validate({"from": "a", "to": "b", "results": results})

    def test_when_transfers_below_minus_one_then_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            JourneyPlanParams.model_validate({"from": "a", "to": "b", "transfers": -2})

    def test_when_walking_speed_unknown_then_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            JourneyPlanParams.model_validate({"from": "a", "to": "b", "walkingSpeed": "run"})

    def test_query_uses_from_and_omits_absent_times(self) -> None:
        params = JourneyPlanParams.model_validate({"from": "a", "to": "b"})

        query = params.to_query()

        assert query["from"] == "a"
        assert "from_" not in query
        assert "departure" not in query
        assert "arrival" not in query
        assert "accessibility" not in query
        assert query["transferTime"] == 0
        assert query["walkingSpeed"] == "normal"


class TestTripDetailsParams:
    """Tests for TripDetailsParams."""

    def test_when_valid_then_defaults_applied(self) -> None:
        params = TripDetailsParams.model_validate({"tripId": "1|2|3"})

        assert params.stopovers is True
        assert params.polyline is False
        assert params.line_name is None

    def test_when_trip_id_empty_then_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            TripDetailsParams.model_validate({"tripId": ""})


class TestRadarParams:
    """Tests for RadarParams."""

    def test_when_valid_box_then_accepted(self) -> None:
        """Given a Berlin bounding box, when validating, then defaults are filled in."""
        params = RadarParams.model_validate(
            {"north": 52.52, "west": 13.36, "south": 52.5, "east": 13.43}
        )

        assert params.results == 256
        assert params.duration == 30
        assert params.frames == 3
        assert params.polylines is True

    def test_when_integers_given_for_bounds_then_accepted(self) -> None:
        params = RadarParams.model_validate({"north": 53, "west": 13, "south": 52, "east": 14})

        assert params.north == 53

    def test_when_north_not_greater_than_south_then_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError) as exc_info:
            RadarParams.model_validate(
                {"north": 52.5, "west": 13.36, "south": 52.52, "east": 13.43}
            )

        assert _error_locs(exc_info) == [("south",)]
        assert "Northern boundary must be greater than southern boundary" in str(exc_info.value)

    def test_when_east_not_greater_than_west_then_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError) as exc_info:
            RadarParams.model_validate({"north": 52.52, "west": 13.4, "south": 52.5, "east": 13.4})

        assert _error_locs(exc_info) == [("east",)]
        assert "Eastern boundary must be greater than western boundary" in str(exc_info.value)

    def test_when_latitude_out_of_range_then_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            RadarParams.model_validate({"north": 91, "west": 13.36, "south": 52.5, "east": 13.43})

    def test_when_frames_above_maximum_then_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            RadarParams.model_validate(
                {"north": 52.52, "west": 13.36, "south": 52.5, "east": 13.43, "frames": 21}
            )

"""Journey, leg, stopover and price domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from bvg_mcp.domain.models.line import Line, Remark, parse_remarks
from bvg_mcp.domain.models.location import Stop
from bvg_mcp.domain.models.timestamps import non_negative, parse_timestamp


@dataclass(frozen=True)
class Stopover:
    """An intermediate stop of a leg or trip."""

    stop: Stop | None
    arrival: datetime | None
    planned_arrival: datetime | None
    departure: datetime | None
    planned_departure: datetime | None
    platform: str | None = None
    planned_platform: str | None = None
    remarks: list[Remark] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Stopover":
        stop = data.get("stop")
        return cls(
            stop=Stop.from_api(stop) if isinstance(stop, dict) else None,
            arrival=parse_timestamp(data.get("arrival")),
            planned_arrival=parse_timestamp(data.get("plannedArrival")),
            departure=parse_timestamp(data.get("departure")),
            planned_departure=parse_timestamp(data.get("plannedDeparture")),
            platform=data.get("platform") or data.get("departurePlatform"),
            planned_platform=data.get("plannedPlatform") or data.get("plannedDeparturePlatform"),
            remarks=parse_remarks(data.get("remarks")),
        )


def parse_stopovers(data: Any) -> list[Stopover] | None:
    if not isinstance(data, list):
        return None
    return [Stopover.from_api(item) for item in data if isinstance(item, dict)]


@dataclass(frozen=True)
class Price:
    amount: float
    currency: str
    hint: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Price | None":
        """Decode a price; an unknown amount means no price."""
        amount = data.get("amount")
        if isinstance(amount, bool) or not isinstance(amount, int | float):
            return None
        return cls(
            amount=float(amount),
            currency=str(data.get("currency", "EUR")),
            hint=data.get("hint"),
        )


@dataclass(frozen=True)
class Leg:
    """One walking or transit segment of a journey."""

    origin: Stop | None
    destination: Stop | None
    departure: datetime | None
    planned_departure: datetime | None
    arrival: datetime | None
    planned_arrival: datetime | None
    departure_delay: int | None = None
    arrival_delay: int | None = None
    trip_id: str | None = None
    line: Line | None = None
    direction: str | None = None
    departure_platform: str | None = None
    arrival_platform: str | None = None
    stopovers: list[Stopover] | None = None
    distance: int | None = None
    walking: bool = False
    transfer: bool = False
    polyline: dict[str, Any] | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Leg":
        origin = data.get("origin")
        destination = data.get("destination")
        line = data.get("line")
        return cls(
            origin=Stop.from_api(origin) if isinstance(origin, dict) else None,
            destination=Stop.from_api(destination) if isinstance(destination, dict) else None,
            departure=parse_timestamp(data.get("departure")),
            planned_departure=parse_timestamp(data.get("plannedDeparture")),
            arrival=parse_timestamp(data.get("arrival")),
            planned_arrival=parse_timestamp(data.get("plannedArrival")),
            departure_delay=data.get("departureDelay"),
            arrival_delay=data.get("arrivalDelay"),
            trip_id=data.get("tripId"),
            line=Line.from_api(line) if isinstance(line, dict) else None,
            direction=data.get("direction"),
            departure_platform=data.get("departurePlatform"),
            arrival_platform=data.get("arrivalPlatform"),
            stopovers=parse_stopovers(data.get("stopovers")),
            distance=non_negative(data.get("distance")),
            walking=bool(data.get("walking", False)),
            transfer=bool(data.get("transfer", False)),
            polyline=data.get("polyline"),
        )

    @property
    def duration_minutes(self) -> int | None:
        """Real-time duration if known, otherwise the planned one."""
        start = self.departure or self.planned_departure
        end = self.arrival or self.planned_arrival
        if start is None or end is None:
            return None
        return max(0, int((end - start).total_seconds() // 60))


@dataclass(frozen=True)
class Journey:
    """An ordered sequence of legs from origin to destination."""

    legs: list[Leg]
    refresh_token: str | None = None
    price: Price | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Journey":
        price = data.get("price")
        return cls(
            legs=[Leg.from_api(leg) for leg in data.get("legs", []) if isinstance(leg, dict)],
            refresh_token=data.get("refreshToken"),
            price=Price.from_api(price) if isinstance(price, dict) else None,
        )

    @property
    def transfers(self) -> int:
        """Number of changes between transit legs."""
        transit_legs = [leg for leg in self.legs if not leg.walking]
        return max(0, len(transit_legs) - 1)

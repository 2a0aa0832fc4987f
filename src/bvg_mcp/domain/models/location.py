"""Location, stop and products domain models."""

from dataclasses import dataclass
from typing import Any

from bvg_mcp.domain.models.timestamps import non_negative


@dataclass(frozen=True)
class Products:
    """Transport modes serving a location. ``None`` means unknown, not "not served"."""

    suburban: bool | None = None
    subway: bool | None = None
    tram: bool | None = None
    bus: bool | None = None
    ferry: bool | None = None
    express: bool | None = None
    regional: bool | None = None

    @classmethod
    def from_api(cls, data: Any) -> "Products":
        if not isinstance(data, dict):
            return cls()
        return cls(
            **{
                name: data[name]
                for name in cls.__dataclass_fields__
                if isinstance(data.get(name), bool)
            }
        )

    def served_modes(self) -> list[str]:
        """Names of the modes known to serve the location."""
        return [name for name in self.__dataclass_fields__ if getattr(self, name) is True]


@dataclass(frozen=True)
class Location:
    """A point of interest, an address or a stop returned by the API."""

    type: str
    id: str | None
    name: str | None
    latitude: float | None
    longitude: float | None
    address: str | None = None
    distance: int | None = None
    products: Products | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Location":
        if data.get("type") in ("stop", "station"):
            return Stop.from_api(data)
        return cls(
            type=str(data.get("type", "location")),
            id=_optional_str(data.get("id")),
            name=_optional_str(data.get("name")),
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            address=_optional_str(data.get("address")),
            distance=non_negative(data.get("distance")),
            products=Products.from_api(data["products"]) if "products" in data else None,
        )


@dataclass(frozen=True)
class Stop(Location):
    """A stop or station. ``station`` is a copy of the parent station, if any."""

    station: "Stop | None" = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Stop":
        # Stops nest their coordinates in a "location" object
        coords = data.get("location") or {}
        parent = data.get("station")
        return cls(
            type=str(data.get("type", "stop")),
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            latitude=coords.get("latitude", data.get("latitude")),
            longitude=coords.get("longitude", data.get("longitude")),
            distance=non_negative(data.get("distance")),
            products=Products.from_api(data.get("products")),
            station=cls.from_api(parent) if isinstance(parent, dict) else None,
        )


def _optional_str(value: Any) -> str | None:
    return str(value) if value is not None else None

"""Line, operator and remark domain models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class LineMode(str, Enum):
    """Transport mode of a line."""

    TRAIN = "train"
    BUS = "bus"
    WATERCRAFT = "watercraft"
    TAXI = "taxi"
    GONDOLA = "gondola"
    AIRCRAFT = "aircraft"
    CAR = "car"
    BICYCLE = "bicycle"
    WALKING = "walking"


@dataclass(frozen=True)
class Operator:
    """Company operating a line."""

    id: str
    name: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Operator":
        return cls(id=str(data.get("id", "")), name=str(data.get("name", "")))


@dataclass(frozen=True)
class Line:
    """A transit line such as U2 or M10."""

    id: str
    name: str
    public: bool
    mode: LineMode | None
    product: str
    product_name: str | None = None
    operator: Operator | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Line":
        operator = data.get("operator")
        try:
            mode: LineMode | None = LineMode(data.get("mode"))
        except ValueError:
            mode = None
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            public=bool(data.get("public", True)),
            mode=mode,
            product=str(data.get("product", "")),
            product_name=data.get("productName"),
            operator=Operator.from_api(operator) if isinstance(operator, dict) else None,
        )


@dataclass(frozen=True)
class Remark:
    """An advisory attached to a departure, leg or stopover."""

    type: str
    text: str
    code: str | None = None
    summary: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Remark":
        return cls(
            type=str(data.get("type", "hint")),
            text=str(data.get("text", "")),
            code=data.get("code"),
            summary=data.get("summary"),
        )


def parse_remarks(data: Any) -> list[Remark]:
    """Decode a list of remarks, skipping malformed entries."""
    if not isinstance(data, list):
        return []
    return [Remark.from_api(item) for item in data if isinstance(item, dict)]

"""Domain models for BVG transit data."""

from bvg_mcp.domain.models.departure import Arrival, Departure
from bvg_mcp.domain.models.journey import Journey, Leg, Price, Stopover
from bvg_mcp.domain.models.line import Line, LineMode, Operator, Remark
from bvg_mcp.domain.models.location import Location, Products, Stop
from bvg_mcp.domain.models.radar import RadarMovement, RadarResult
from bvg_mcp.domain.models.trip import Trip

__all__ = [
    "Arrival",
    "Departure",
    "Journey",
    "Leg",
    "Line",
    "LineMode",
    "Location",
    "Operator",
    "Price",
    "Products",
    "RadarMovement",
    "RadarResult",
    "Remark",
    "Stop",
    "Stopover",
    "Trip",
]

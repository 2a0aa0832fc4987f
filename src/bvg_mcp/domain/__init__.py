"""Domain layer - transit value objects, validators and ports."""

from bvg_mcp.domain.errors import (
    BvgApiError,
    BvgMcpError,
    NetworkFailure,
    ToolExecutionError,
    ToolNotFound,
    TransportError,
    UpstreamError,
    ValidationError,
)
from bvg_mcp.domain.validators import Coordinates, parse_coordinates, validate_stop_id

__all__ = [
    "BvgApiError",
    "BvgMcpError",
    "Coordinates",
    "NetworkFailure",
    "ToolExecutionError",
    "ToolNotFound",
    "TransportError",
    "UpstreamError",
    "ValidationError",
    "parse_coordinates",
    "validate_stop_id",
]

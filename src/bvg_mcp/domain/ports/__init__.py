"""Ports (interfaces) for the ports-and-adapters architecture."""

from bvg_mcp.domain.ports.tool_invoker import ToolInvoker
from bvg_mcp.domain.ports.transit_api import QueryParams, QueryValue, TransitApi

__all__ = [
    "QueryParams",
    "QueryValue",
    "ToolInvoker",
    "TransitApi",
]

"""Application layer - tool contracts, handlers and dispatch."""

from bvg_mcp.application.catalog import TOOL_CATALOG, ToolDefinition
from bvg_mcp.application.discovery import to_discovery_schema
from bvg_mcp.application.dispatcher import ToolDispatcher

__all__ = [
    "TOOL_CATALOG",
    "ToolDefinition",
    "ToolDispatcher",
    "to_discovery_schema",
]

"""Adapters layer - external system integrations."""

from bvg_mcp.adapters.bvg_api import BvgHttpClient
from bvg_mcp.adapters.config import AppConfig
from bvg_mcp.adapters.mcp import McpStdioServer

__all__ = [
    "AppConfig",
    "BvgHttpClient",
    "McpStdioServer",
]

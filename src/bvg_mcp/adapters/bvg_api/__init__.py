"""BVG transport.rest API adapter."""

from bvg_mcp.adapters.bvg_api.constants import BVG_API_BASE_URL
from bvg_mcp.adapters.bvg_api.http_client import BvgHttpClient, encode_query

__all__ = ["BVG_API_BASE_URL", "BvgHttpClient", "encode_query"]

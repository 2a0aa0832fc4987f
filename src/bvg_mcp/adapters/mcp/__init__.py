"""MCP (Model Context Protocol) transport adapter."""

from bvg_mcp.adapters.mcp.jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    jsonrpc_error,
    jsonrpc_response,
)
from bvg_mcp.adapters.mcp.stdio_server import SUPPORTED_PROTOCOL_VERSIONS, McpStdioServer

__all__ = [
    "INTERNAL_ERROR",
    "INVALID_PARAMS",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "PARSE_ERROR",
    "SUPPORTED_PROTOCOL_VERSIONS",
    "McpStdioServer",
    "jsonrpc_error",
    "jsonrpc_response",
]

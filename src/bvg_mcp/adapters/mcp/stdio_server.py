"""MCP server speaking newline-delimited JSON-RPC 2.0 over stdin/stdout."""

import asyncio
import json
import logging
import sys
from typing import Any, TextIO

from bvg_mcp import __version__
from bvg_mcp.adapters.mcp.jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    jsonrpc_error,
    jsonrpc_response,
)
from bvg_mcp.domain.errors import BvgMcpError, ToolNotFound, ValidationError
from bvg_mcp.domain.ports.tool_invoker import ToolInvoker

logger = logging.getLogger(__name__)

# Newest first; the first entry is offered when the client asks for an unknown version
SUPPORTED_PROTOCOL_VERSIONS = ("2025-06-18", "2025-03-26", "2024-11-05")

SERVER_NAME = "bvg-mcp-server"
INSTRUCTIONS = (
    "Berlin public transport (BVG/VBB) data. Use locations_search to resolve station "
    "names to stop IDs before calling the stop_* and journey_plan tools."
)


class McpStdioServer:
    """Routes MCP requests to the tool dispatcher.

    Each request runs in its own task so a slow upstream call never blocks
    other requests. Responses are written one JSON document per line.
    """

    def __init__(
        self,
        dispatcher: ToolInvoker,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._write_lock = asyncio.Lock()
        self._tasks: set[asyncio.Task[None]] = set()
        self._in_flight: dict[str | int, asyncio.Task[None]] = {}

    async def run(self) -> None:
        """Serve requests until stdin is closed, then wait for in-flight requests."""
        logger.info("BVG MCP server running on stdio")
        while True:
            line = await asyncio.to_thread(self._stdin.readline)
            if not line:
                break
            line = line.strip()
            if not line:
                continue
            try:
                message = json.loads(line)
            except ValueError:
                logger.warning(f"Discarding unparsable message: {line[:200]}")
                await self._write(jsonrpc_error(None, PARSE_ERROR, "Parse error"))
                continue
            self._spawn(message)

        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        logger.info("stdin closed, server stopped")

    def _spawn(self, message: Any) -> None:
        task = asyncio.create_task(self._process(message))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

        request_id = message.get("id") if isinstance(message, dict) else None
        if isinstance(request_id, str | int) and message.get("method") is not None:
            self._in_flight[request_id] = task
            task.add_done_callback(lambda _: self._in_flight.pop(request_id, None))

    async def _process(self, message: Any) -> None:
        response = await self.handle_message(message)
        if response is not None:
            await self._write(response)

    async def _write(self, payload: dict[str, Any] | list[dict[str, Any]]) -> None:
        async with self._write_lock:
            self._stdout.write(json.dumps(payload, ensure_ascii=False) + "\n")
            self._stdout.flush()

    async def handle_message(self, message: Any) -> dict[str, Any] | list[dict[str, Any]] | None:
        """Handle a single request or a batch. Returns None when nothing is to be sent."""
        if isinstance(message, list):
            if not message:
                return jsonrpc_error(None, INVALID_REQUEST, "Invalid request: empty batch")
            responses = [await self._handle_request(item) for item in message]
            answered = [r for r in responses if r is not None]
            return answered or None
        return await self._handle_request(message)

    async def _handle_request(self, body: Any) -> dict[str, Any] | None:
        if not isinstance(body, dict) or not isinstance(body.get("method"), str):
            request_id = body.get("id") if isinstance(body, dict) else None
            return jsonrpc_error(request_id, INVALID_REQUEST, "Invalid request")

        method = body["method"]
        params = body.get("params") or {}

        if "id" not in body:  # Notification - no response
            self._handle_notification(method, params)
            return None

        request_id = body["id"]

        if method == "initialize":
            return jsonrpc_response(request_id, self._initialize_result(params))
        elif method == "ping":
            return jsonrpc_response(request_id, {})
        elif method == "tools/list":
            return jsonrpc_response(request_id, {"tools": self._dispatcher.list_tools()})
        elif method == "tools/call":
            return await self._handle_call_tool(request_id, params)
        else:
            return jsonrpc_error(request_id, METHOD_NOT_FOUND, f"Method not found: {method}")

    def _initialize_result(self, params: Any) -> dict[str, Any]:
        requested = params.get("protocolVersion") if isinstance(params, dict) else None
        if requested in SUPPORTED_PROTOCOL_VERSIONS:
            version = requested
        else:
            version = SUPPORTED_PROTOCOL_VERSIONS[0]
        return {
            "protocolVersion": version,
            "capabilities": {"tools": {"listChanged": False}},
            "serverInfo": {"name": SERVER_NAME, "version": __version__},
            "instructions": INSTRUCTIONS,
        }

    def _handle_notification(self, method: str, params: Any) -> None:
        if method == "notifications/cancelled" and isinstance(params, dict):
            task = self._in_flight.get(params.get("requestId"))
            if task is not None:
                logger.info(f"Cancelling request {params.get('requestId')}: {params.get('reason')}")
                task.cancel()
        else:
            logger.debug(f"Ignoring notification {method}")

    async def _handle_call_tool(self, request_id: Any, params: Any) -> dict[str, Any]:
        """Handle MCP tools/call request."""
        if not isinstance(params, dict) or not isinstance(params.get("name"), str):
            return jsonrpc_error(request_id, INVALID_PARAMS, "tools/call requires a tool name")

        tool_name = params["name"]
        logger.info(f"tools/call {tool_name}")

        try:
            result = await self._dispatcher.call_tool(tool_name, params.get("arguments"))
        except ToolNotFound as e:
            return jsonrpc_error(request_id, METHOD_NOT_FOUND, e.message)
        except ValidationError as e:
            return jsonrpc_error(
                request_id, INVALID_PARAMS, e.message, data={"fields": list(e.fields)}
            )
        except BvgMcpError as e:
            return jsonrpc_error(request_id, INTERNAL_ERROR, f"Tool execution failed: {e}")
        except Exception as e:
            logger.error(f"Unhandled exception in tool {tool_name}: {e}", exc_info=True)
            return jsonrpc_error(request_id, INTERNAL_ERROR, f"Tool execution failed: {e}")

        return jsonrpc_response(request_id, result)

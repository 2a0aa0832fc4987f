"""Routing of tool invocations to their handlers."""

import json
import logging
import time
from collections.abc import Iterable, Mapping
from typing import Any

import pydantic
from pydantic import BaseModel

from bvg_mcp.application.catalog import TOOL_CATALOG, ToolDefinition
from bvg_mcp.domain.errors import ToolNotFound, ValidationError
from bvg_mcp.domain.ports.transit_api import TransitApi

logger = logging.getLogger(__name__)


def _to_validation_error(tool_name: str, error: pydantic.ValidationError) -> ValidationError:
    """Flatten pydantic's error list into one message naming every violated field."""
    fields: list[str] = []
    problems: list[str] = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"]) or "arguments"
        if field not in fields:
            fields.append(field)
        problems.append(f"{field}: {detail['msg']}")
    message = f"Invalid arguments for tool '{tool_name}': " + "; ".join(problems)
    return ValidationError(message, fields=tuple(fields))


class ToolDispatcher:
    """Validates tool arguments and invokes the matching handler.

    Holds only the API port and the immutable tool table, so a single
    instance can serve concurrent invocations.
    """

    def __init__(
        self, api: TransitApi, catalog: Iterable[ToolDefinition] = TOOL_CATALOG
    ) -> None:
        self._api = api
        self._tools = {tool.name: tool for tool in catalog}

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools)

    def list_tools(self) -> list[dict[str, Any]]:
        """Discovery descriptions for every registered tool."""
        return [tool.to_mcp() for tool in self._tools.values()]

    def get_tool(self, name: str) -> ToolDefinition:
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFound(name)
        return tool

    def validate(self, tool: ToolDefinition, arguments: Any) -> BaseModel:
        """Validate raw arguments against the tool's parameter model.

        Raises:
            ValidationError: Listing the violated fields.
        """
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise ValidationError(
                f"Invalid arguments for tool '{tool.name}': arguments must be an object",
                fields=("arguments",),
            )
        try:
            return tool.params_model.model_validate(dict(arguments))
        except pydantic.ValidationError as e:
            raise _to_validation_error(tool.name, e) from e

    async def invoke(self, name: str, arguments: Any = None) -> Any:
        """Run a tool and return the handler's result unchanged.

        Raises:
            ToolNotFound: If no tool is registered under ``name``.
            ValidationError: If ``arguments`` do not satisfy the tool's contract.
        """
        tool = self.get_tool(name)
        params = self.validate(tool, arguments)

        start_time = time.perf_counter()
        try:
            result = await tool.handler(self._api, params)
        except Exception:
            latency_ms = int((time.perf_counter() - start_time) * 1000)
            logger.warning(f"Tool {name} failed after {latency_ms}ms")
            raise
        latency_ms = int((time.perf_counter() - start_time) * 1000)
        logger.info(f"Tool {name} completed in {latency_ms}ms")
        return result

    async def call_tool(self, name: str, arguments: Any = None) -> dict[str, Any]:
        """Run a tool and wrap its result as an MCP ``CallToolResult``."""
        result = await self.invoke(name, arguments)
        return {
            "content": [
                {
                    "type": "text",
                    "text": json.dumps(result, indent=2, ensure_ascii=False),
                }
            ],
        }

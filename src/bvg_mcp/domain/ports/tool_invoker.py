"""Tool invoker port, implemented by the application's dispatcher."""

from typing import Any, Protocol


class ToolInvoker(Protocol):
    """Port used by transports to discover and call tools."""

    def list_tools(self) -> list[dict[str, Any]]:
        """Discovery descriptions (name, description, inputSchema) of every tool."""
        ...

    async def call_tool(self, name: str, arguments: Any = None) -> dict[str, Any]:
        """Invoke a tool and return its MCP ``CallToolResult``.

        Raises:
            ToolNotFound: If the tool is not registered.
            ValidationError: If the arguments violate the tool's contract.
        """
        ...

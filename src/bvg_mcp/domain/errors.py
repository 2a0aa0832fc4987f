"""Error taxonomy for tool invocations and upstream API calls."""


class BvgMcpError(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BvgMcpError, ValueError):
    """Tool arguments do not satisfy the tool's declared constraints.

    Subclasses ValueError so the domain validators can run inside pydantic
    field validators and surface as located field errors.
    """

    def __init__(self, message: str, fields: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.fields = fields


class ToolNotFound(BvgMcpError):
    """An invocation named a tool that is not registered."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class ToolExecutionError(BvgMcpError):
    """A tool handler failed; the message carries the handler's prefix."""


class BvgApiError(BvgMcpError):
    """Base class for failures talking to the upstream transit API."""


class TransportError(BvgApiError):
    """The upstream answered with a non-success HTTP status."""

    def __init__(self, status: int, message: str | None = None) -> None:
        detail = f"HTTP error! status: {status}"
        if message:
            detail = f"{detail} ({message})"
        super().__init__(detail)
        self.status = status
        self.upstream_message = message


class UpstreamError(BvgApiError):
    """The upstream answered successfully but reported an application error."""

    def __init__(self, message: str) -> None:
        super().__init__(message)

    def __str__(self) -> str:
        return f"BVG API error: {self.message}"


class NetworkFailure(BvgApiError):
    """The request could not complete (DNS, connection, timeout)."""

    def __str__(self) -> str:
        return f"Network failure: {self.message}"

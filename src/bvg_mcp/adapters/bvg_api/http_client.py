"""HTTP client for the BVG transport.rest API.

Uses the v6.bvg.transport.rest public API.
API Documentation: https://v6.bvg.transport.rest/api.html
"""

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

import aiohttp
from yarl import URL

from bvg_mcp import __version__
from bvg_mcp.adapters.api_request_logger import log_api_request, log_api_response
from bvg_mcp.adapters.bvg_api.constants import BVG_API_BASE_URL
from bvg_mcp.domain.errors import NetworkFailure, TransportError, UpstreamError
from bvg_mcp.domain.ports.transit_api import QueryParams, QueryValue

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

DEFAULT_USER_AGENT = f"bvg-mcp-server/{__version__}"


def _stringify(value: QueryValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode_query(params: QueryParams | None) -> dict[str, str]:
    """Stringify query values, dropping parameters whose value is None."""
    if not params:
        return {}
    return {key: _stringify(value) for key, value in params.items() if value is not None}


def is_api_error(data: Any) -> bool:
    """Whether a decoded body has the upstream error shape ``{error: true, msg: str}``."""
    return isinstance(data, dict) and data.get("error") is True and isinstance(data.get("msg"), str)


def _error_message(body: str) -> str | None:
    """Best-effort message from the body of a failed response."""
    try:
        data = json.loads(body)
    except ValueError:
        return body[:200] or None
    if is_api_error(data):
        return str(data["msg"])
    return None


class BvgHttpClient:
    """HTTP client for the BVG API.

    Holds only the session, the base URL and the request headers, so one
    instance is shared by all concurrent tool invocations. There are no
    retries: one failed request is one failed tool call.
    """

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = BVG_API_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """Initialize with an aiohttp session and the upstream base URL."""
        self._session = session
        self._base_url = URL(base_url)
        self._headers = {"Accept": "application/json", "User-Agent": user_agent}

    @property
    def base_url(self) -> str:
        return str(self._base_url)

    def build_url(self, endpoint: str, params: QueryParams | None = None) -> URL:
        """Resolve ``endpoint`` against the base URL and attach the query string.

        ``endpoint`` must already have its dynamic path segments percent-encoded.
        """
        url = self._base_url.join(URL(endpoint, encoded=True))
        query = encode_query(params)
        return url.with_query(query) if query else url

    async def get(self, endpoint: str, params: QueryParams | None = None) -> Any:
        """GET ``endpoint`` and return the decoded JSON body.

        Raises:
            NetworkFailure: If no response was received.
            TransportError: If the response status is not 2xx.
            UpstreamError: If the body reports an API error or is not JSON.
        """
        url = self.build_url(endpoint, params)
        logger.debug(f"GET {url}")
        log_api_request("GET", str(url), self._headers)

        try:
            async with self._session.get(url, headers=self._headers) as response:
                status = response.status
                raw = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Request to BVG API failed for {url}: {e!r}")
            raise NetworkFailure(str(e) or e.__class__.__name__) from e

        body = raw.decode("utf-8", errors="replace")
        log_api_response(str(url), status, body)

        if not 200 <= status < 300:
            message = _error_message(body)
            logger.warning(f"BVG API returned status {status} for {url}: {message}")
            raise TransportError(status, message)

        try:
            data = json.loads(raw.decode("utf-8"))
        except ValueError as e:  # includes UnicodeDecodeError
            raise UpstreamError("Invalid JSON in response body") from e

        if is_api_error(data):
            logger.warning(f"BVG API reported an error for {url}: {data['msg']}")
            raise UpstreamError(data["msg"])

        return data

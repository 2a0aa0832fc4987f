"""Full request/response dumps for upstream calls, enabled by BVG_MCP_LOG_REQUESTS."""

import json
import logging
import os
from collections.abc import Mapping

logger = logging.getLogger(__name__)

_MAX_BODY_CHARS = 2000


def should_log_requests() -> bool:
    """Check if request logging is enabled via the BVG_MCP_LOG_REQUESTS environment variable."""
    return os.getenv("BVG_MCP_LOG_REQUESTS", "").lower() == "true"


def _redact_sensitive_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Redact sensitive headers from logging."""
    sensitive_keys = {"authorization", "cookie", "x-api-key"}
    return {k: "***REDACTED***" if k.lower() in sensitive_keys else v for k, v in headers.items()}


def _truncate(body: str) -> str:
    if len(body) <= _MAX_BODY_CHARS:
        return body
    return f"{body[:_MAX_BODY_CHARS]}... ({len(body)} chars)"


def log_api_request(method: str, url: str, headers: Mapping[str, str] | None = None) -> None:
    """Log an outbound request if BVG_MCP_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method.
        url: Full request URL including the query string.
        headers: Request headers; sensitive values are redacted.
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {url}"]
    if headers:
        log_parts.append(f"Headers: {json.dumps(_redact_sensitive_headers(headers), indent=2)}")

    logger.info("API Request:\n" + "\n".join(log_parts))


def log_api_response(url: str, status: int, body: str) -> None:
    """Log an upstream response (status and truncated body) if logging is enabled."""
    if not should_log_requests():
        return

    logger.info(f"API Response: {status} for {url}\n{_truncate(body)}")

"""Main entry point for the BVG MCP server."""

import asyncio
import logging
import sys

import aiohttp

from bvg_mcp.adapters.bvg_api import BvgHttpClient
from bvg_mcp.adapters.config import AppConfig
from bvg_mcp.adapters.mcp import McpStdioServer
from bvg_mcp.application import ToolDispatcher

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send logs to stderr; stdout is reserved for protocol messages."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def main(config: AppConfig) -> None:
    """Serve MCP requests on stdio until the host closes stdin."""
    logger.info(f"Using BVG API at {config.bvg_api_base_url}")

    # One session and one client for the lifetime of the process
    async with aiohttp.ClientSession() as session:
        client = BvgHttpClient(
            session,
            base_url=config.bvg_api_base_url,
            user_agent=config.bvg_api_user_agent,
        )
        dispatcher = ToolDispatcher(client)
        server = McpStdioServer(dispatcher)
        await server.run()


def cli_main() -> None:
    """Synchronous entry point for the bvg-mcp-server command."""
    try:
        config = AppConfig()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(config.log_level)

    try:
        asyncio.run(main(config))
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    cli_main()

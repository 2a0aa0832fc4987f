"""Configuration adapters."""

from bvg_mcp.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]

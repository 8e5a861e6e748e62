"""Configuration package."""

from hotelstate.config.logging import configure_logging, get_logger
from hotelstate.config.settings import Settings, settings

__all__ = ["settings", "Settings", "configure_logging", "get_logger"]

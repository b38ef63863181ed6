"""Configuration module for skosgraph."""

from .settings import Settings, get_settings
from .logging import LOGGER_NAME, setup_logging, get_logger

__all__ = ["Settings", "get_settings", "LOGGER_NAME", "setup_logging", "get_logger"]

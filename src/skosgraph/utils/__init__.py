"""Utility functions for loading configuration and nodes."""

from .config_io import ConfigError, load_config, parse_config
from .node_io import load_nodes

__all__ = [
    "ConfigError",
    "load_config",
    "parse_config",
    "load_nodes",
]

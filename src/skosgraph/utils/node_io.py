"""Utilities for loading node records exported from the content graph."""

from pathlib import Path
from typing import Any, Dict, List, Union
from pydantic import TypeAdapter, ValidationError
from skosgraph.config.logging import get_logger
from .config_io import ConfigError

logger = get_logger(__name__)

# A node file holds one node object or a list of them
NodeFile = Union[List[Dict[str, Any]], Dict[str, Any]]


def load_nodes(nodes_path: Path) -> List[Dict[str, Any]]:
    """
    Load node records from a JSON file.

    Args:
        nodes_path: Path to a JSON file with a node object or a list of nodes

    Returns:
        List of node records

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigError: If the file is empty, not JSON or holds something else
    """
    nodes_path = Path(nodes_path)
    if not nodes_path.exists():
        raise FileNotFoundError(f"Node file not found: {nodes_path}")

    file_content = nodes_path.read_text(encoding="utf-8").strip()
    if not file_content:
        raise ConfigError(f"Node file is empty: {nodes_path}")

    try:
        data = TypeAdapter(NodeFile).validate_json(file_content)
    except ValidationError as e:
        logger.error(f"Error loading nodes from {nodes_path}: {e}")
        raise ConfigError(
            f"{nodes_path} must contain a node object or a list of them: {e}"
        ) from e

    return [data] if isinstance(data, dict) else data

"""Utilities for loading the vocabulary configuration file."""

import json
from pathlib import Path
from typing import Any, Dict, Optional
import yaml
from pydantic import ValidationError
from skosgraph.config.logging import get_logger
from skosgraph.config.settings import get_settings
from skosgraph.ir.properties import PROPERTY_TYPES
from skosgraph.ir.vocab import VocabConfig

logger = get_logger(__name__)


class ConfigError(ValueError):
    """Raised when the vocabulary configuration cannot be loaded."""


def _normalize_property_types(raw: Dict[str, Any], strict: bool) -> None:
    """Default missing property types to plain and check the others."""
    for prop in raw["custom_properties"]:
        if not isinstance(prop, dict):
            continue
        prop_type = prop.get("type")
        if prop_type is None:
            prop["type"] = "plain"
        elif prop_type not in PROPERTY_TYPES:
            if strict:
                raise ConfigError(
                    f"Custom property '{prop.get('id')}' has unknown type "
                    f"'{prop_type}'. Expected one of: {', '.join(PROPERTY_TYPES)}"
                )
            logger.warning(
                f"Custom property '{prop.get('id')}' has unknown type "
                f"'{prop_type}', treating it as plain"
            )
            prop["type"] = "plain"


def parse_config(raw: Any, strict: Optional[bool] = None) -> VocabConfig:
    """
    Validate a raw configuration mapping into a VocabConfig.

    Args:
        raw: Parsed configuration document
        strict: Reject unknown property types; defaults to the
            ``strict_property_types`` setting

    Returns:
        Validated VocabConfig

    Raises:
        ConfigError: If the document is not a valid configuration
    """
    if strict is None:
        strict = get_settings().strict_property_types
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(
            f"Configuration must be a mapping, got {type(raw).__name__}"
        )

    raw = dict(raw)
    raw["custom_properties"] = [
        dict(p) if isinstance(p, dict) else p
        for p in raw.get("custom_properties") or []
    ]
    if raw.get("languages") is None:
        raw["languages"] = []
    _normalize_property_types(raw, strict)

    try:
        return VocabConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def load_config(config_path: Path, strict: Optional[bool] = None) -> VocabConfig:
    """
    Load the vocabulary configuration from a YAML or JSON file.

    Args:
        config_path: Path to a ``.yaml``/``.yml`` or ``.json`` file
        strict: Reject unknown property types (see ``parse_config``)

    Returns:
        Loaded VocabConfig

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigError: If the file is empty, unparsable or invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    content = config_path.read_text(encoding="utf-8").strip()
    if not content:
        raise ConfigError(f"Config file is empty: {config_path}")

    try:
        if config_path.suffix.lower() == ".json":
            raw = json.loads(content)
        else:
            raw = yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        logger.error(f"Error parsing config {config_path}: {e}")
        raise ConfigError(f"Failed to parse config {config_path}: {e}") from e

    try:
        config = parse_config(raw, strict=strict)
    except ConfigError as e:
        logger.error(f"Error loading config {config_path}: {e}")
        raise ConfigError(f"{config_path}: {e}") from e

    logger.info(
        f"Loaded {len(config.custom_properties)} custom properties from {config_path}"
    )
    return config

"""Resolve custom property values of a node for display."""

from collections.abc import Mapping, Sized
from typing import Any, List, Optional, Sequence
from skosgraph.config.logging import get_logger
from skosgraph.i18n import i18n
from skosgraph.ir.properties import PropertyDescriptor, ResolvedProperty

logger = get_logger(__name__)


def is_empty(value: Any) -> bool:
    """
    Whether a field value counts as absent.

    None, zero-length strings, sequences and mappings, False, zero and NaN
    are empty. Anything else is present.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0 or value != value
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def properties_for(
    properties: Optional[Sequence[PropertyDescriptor]], class_name: Optional[str]
) -> List[PropertyDescriptor]:
    """Descriptors applicable to an entity type, in configuration order."""
    if not properties or not class_name:
        return []
    return [prop for prop in properties if class_name in prop.classes]


def _render_value(prop: PropertyDescriptor, value: Any, language: Optional[str]) -> Any:
    if prop.type == "languageMap":
        return i18n(language)(value)
    if prop.type == "languageMapArray":
        values = i18n(language)(value)
        if isinstance(values, (list, tuple)) and len(values) > 0:
            return list(values)
        return None
    # plain, or a type without a dedicated shape
    return value


def resolve_properties(
    properties: Optional[Sequence[PropertyDescriptor]],
    node: Optional[Mapping[str, Any]],
    language: Optional[str],
) -> List[ResolvedProperty]:
    """
    Resolve each descriptor's value on a node for one display language.

    Descriptors whose value is absent or empty, or whose localized value is
    empty, produce no entry. Output order follows ``properties``.

    Args:
        properties: Descriptors to resolve, typically those of the node's type
        node: Node record; None yields no entries
        language: Display language code

    Returns:
        List of ResolvedProperty entries
    """
    if not properties or node is None:
        return []

    resolved: List[ResolvedProperty] = []
    for prop in properties:
        value = node.get(prop.id)
        if is_empty(value):
            continue

        rendered = _render_value(prop, value, language)
        if is_empty(rendered):
            logger.debug(f"No '{language}' value for property '{prop.id}'")
            continue

        resolved.append(ResolvedProperty(id=prop.id, label=prop.label, value=rendered))

    return resolved


def resolve_node(
    properties: Optional[Sequence[PropertyDescriptor]],
    node: Optional[Mapping[str, Any]],
    language: Optional[str],
) -> List[ResolvedProperty]:
    """Resolve the descriptors that apply to the node's ``type``."""
    if node is None:
        return []
    return resolve_properties(properties_for(properties, node.get("type")), node, language)

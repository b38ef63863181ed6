"""Schema text generation for vocabulary entity types."""

from typing import Iterable, List, Optional, Sequence, Tuple
from skosgraph.config.logging import get_logger
from skosgraph.ir.properties import PropertyDescriptor
from .templates import (
    DEFAULT_LANGUAGE,
    DEFAULT_SCHEMA_TYPE,
    ENTITY_TYPES,
    PROPERTY_SCHEMA_TYPES,
)

logger = get_logger(__name__)

INDENT = "  "


def language_codes(languages: Optional[Iterable[str]]) -> List[str]:
    """
    Normalize a language collection into a deterministic list of codes.

    Sets are sorted; other iterables keep first-seen order with duplicates
    dropped. An empty or missing collection falls back to the default code.
    """
    if not languages:
        return [DEFAULT_LANGUAGE]
    if isinstance(languages, (set, frozenset)):
        codes = sorted(languages)
    else:
        codes = list(dict.fromkeys(languages))
    return codes or [DEFAULT_LANGUAGE]


def custom_fields(
    class_name: str, properties: Sequence[PropertyDescriptor]
) -> List[Tuple[str, str]]:
    """
    Custom ``(field, schema type)`` pairs contributed to an entity type.

    Args:
        class_name: Entity type name, e.g. "Concept"
        properties: Configured custom properties in configuration order

    Returns:
        Pairs for every property whose classes include ``class_name``
    """
    return [
        (prop.id, PROPERTY_SCHEMA_TYPES.get(prop.type, DEFAULT_SCHEMA_TYPE))
        for prop in properties
        if class_name in prop.classes
    ]


def custom_fields_string(
    class_name: str, properties: Sequence[PropertyDescriptor]
) -> str:
    """Custom fields of an entity type as a ``", "``-prefixed suffix, or ""."""
    fields = ", ".join(
        f"{name}: {type_name}"
        for name, type_name in custom_fields(class_name, properties)
    )
    return f", {fields}" if fields else ""


def _entity_block(
    class_name: str,
    fields: List[Tuple[str, str]],
    properties: Sequence[PropertyDescriptor],
) -> str:
    body = f",\n{INDENT}".join(f"{name}: {type_expr}" for name, type_expr in fields)
    return (
        f"type {class_name} implements Node {{\n"
        f"{INDENT}{body}{custom_fields_string(class_name, properties)}\n"
        f"}}"
    )


def _language_block(type_name: str, codes: List[str], value_type: str) -> str:
    body = ", ".join(f"{code}: {value_type}" for code in codes)
    return f"type {type_name} {{\n{INDENT}{body}\n}}"


def generate_schema(
    languages: Optional[Iterable[str]],
    properties: Optional[Sequence[PropertyDescriptor]],
) -> str:
    """
    Generate the schema text for the vocabulary node types.

    Emits the Collection, ConceptScheme and Concept blocks with their fixed
    fields plus configured custom fields, followed by LanguageMap and
    LanguageMapArray with one field per language code.

    Args:
        languages: Language codes in use; empty falls back to "en"
        properties: Configured custom properties

    Returns:
        Schema definition language text
    """
    properties = properties or []
    codes = language_codes(languages)
    if not languages:
        logger.debug(f"No languages configured, using '{DEFAULT_LANGUAGE}'")

    blocks = [
        _entity_block(class_name, fields, properties)
        for class_name, fields in ENTITY_TYPES.items()
    ]
    blocks.append(_language_block("LanguageMap", codes, "String"))
    blocks.append(_language_block("LanguageMapArray", codes, "[String]"))

    logger.debug(
        f"Generated schema for {len(codes)} languages and "
        f"{len(properties)} custom properties"
    )
    return "\n\n".join(blocks) + "\n"

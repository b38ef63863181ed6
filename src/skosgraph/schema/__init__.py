"""Schema text generation."""

from .generator import (
    custom_fields,
    custom_fields_string,
    generate_schema,
    language_codes,
)
from .templates import DEFAULT_LANGUAGE, ENTITY_TYPES, PROPERTY_SCHEMA_TYPES

__all__ = [
    "custom_fields",
    "custom_fields_string",
    "generate_schema",
    "language_codes",
    "DEFAULT_LANGUAGE",
    "ENTITY_TYPES",
    "PROPERTY_SCHEMA_TYPES",
]

"""Data models for vocabulary configuration and resolved values."""

from .properties import (
    ENTITY_TYPE_NAMES,
    PROPERTY_TYPES,
    EntityTypeName,
    PropertyDescriptor,
    PropertyType,
    ResolvedProperty,
)
from .vocab import VocabConfig

__all__ = [
    "ENTITY_TYPE_NAMES",
    "PROPERTY_TYPES",
    "EntityTypeName",
    "PropertyDescriptor",
    "PropertyType",
    "ResolvedProperty",
    "VocabConfig",
]

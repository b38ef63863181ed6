"""Custom property descriptors and resolved property values."""

from typing import Any, Literal, Tuple
from pydantic import BaseModel, ConfigDict

PropertyType = Literal[
    "plain",
    "languageMap",
    "languageMapArray",
]

EntityTypeName = Literal[
    "Collection",
    "ConceptScheme",
    "Concept",
]

ENTITY_TYPE_NAMES: Tuple[str, ...] = ("Collection", "ConceptScheme", "Concept")

PROPERTY_TYPES: Tuple[str, ...] = ("plain", "languageMap", "languageMapArray")


class PropertyDescriptor(BaseModel):
    """A configured extension field attached to one or more entity types."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    type: PropertyType = "plain"
    # Entity type names; names outside ENTITY_TYPE_NAMES never match
    classes: Tuple[str, ...] = ()


class ResolvedProperty(BaseModel):
    """A custom property value localized for display."""

    id: str
    label: str
    value: Any  # str, list of str, or a raw plain value

    @property
    def is_list(self) -> bool:
        return isinstance(self.value, (list, tuple))

"""VocabConfig model for the vocabulary site configuration."""

from typing import List
from pydantic import BaseModel, Field
from .properties import PropertyDescriptor


class VocabConfig(BaseModel):
    """Loaded vocabulary configuration."""

    custom_properties: List[PropertyDescriptor] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)

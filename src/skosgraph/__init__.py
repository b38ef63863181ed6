"""Schema generation and custom property display for SKOS vocabularies."""

from skosgraph.ir import PropertyDescriptor, ResolvedProperty, VocabConfig
from skosgraph.render import render_properties_html, resolve_properties
from skosgraph.schema import generate_schema

__version__ = "0.1.0"

__all__ = [
    "PropertyDescriptor",
    "ResolvedProperty",
    "VocabConfig",
    "generate_schema",
    "render_properties_html",
    "resolve_properties",
]

"""Custom property resolution and presentation."""

from .properties import is_empty, properties_for, resolve_node, resolve_properties
from .html import render_properties_html

__all__ = [
    "is_empty",
    "properties_for",
    "resolve_node",
    "resolve_properties",
    "render_properties_html",
]

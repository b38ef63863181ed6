"""HTML fragment for resolved custom properties."""

from typing import Sequence
from jinja2 import Environment
from skosgraph.ir.properties import ResolvedProperty

_env = Environment(autoescape=True)

PROPERTIES_TEMPLATE = _env.from_string(
    "{% for prop in properties %}"
    "{% if not loop.first %}\n{% endif %}"
    '<div class="custom-property"><h3>{{ prop.label }}</h3><div>'
    "{% if prop.is_list %}"
    "<ul>{% for item in prop.value %}<li>{{ item }}</li>{% endfor %}</ul>"
    "{% else %}{{ prop.value }}{% endif %}"
    "</div></div>"
    "{% endfor %}"
)


def render_properties_html(resolved: Sequence[ResolvedProperty]) -> str:
    """
    Render resolved properties as headed blocks.

    Each entry becomes ``<div class="custom-property">`` holding an ``<h3>``
    label and the value, list values as a ``<ul>`` in their original order.
    Labels and values are HTML-escaped.
    """
    return PROPERTIES_TEMPLATE.render(properties=resolved)

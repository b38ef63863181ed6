"""Tests for custom property resolution."""

import pytest

from skosgraph.ir.properties import PropertyDescriptor
from skosgraph.render.properties import (
    is_empty,
    properties_for,
    resolve_node,
    resolve_properties,
)

ACRONYM = PropertyDescriptor(id="acronym", label="Acronym", classes=["Concept"])
GLOSS = PropertyDescriptor(
    id="gloss", label="Gloss", type="languageMap", classes=["Concept"]
)
SYNONYMS = PropertyDescriptor(
    id="synonyms", label="Synonyms", type="languageMapArray", classes=["Concept"]
)
OWNER = PropertyDescriptor(id="owner", label="Owner", classes=["ConceptScheme"])


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, True),
        ("", True),
        ([], True),
        ({}, True),
        (0, True),
        (False, True),
        (float("nan"), True),
        ("x", False),
        (["a"], False),
        ({"en": ""}, False),
        (1, False),
        (True, False),
    ],
)
def test_is_empty(value, expected):
    """Test the empty-value predicate."""
    assert is_empty(value) is expected


def test_plain_value_verbatim():
    """Test plain values are used as-is."""
    resolved = resolve_properties([ACRONYM], {"acronym": "UN"}, "en")
    assert len(resolved) == 1
    assert resolved[0].label == "Acronym"
    assert resolved[0].value == "UN"
    assert not resolved[0].is_list


def test_plain_value_absent_or_empty():
    """Test absent and empty plain values produce no entry."""
    assert resolve_properties([ACRONYM], {}, "en") == []
    assert resolve_properties([ACRONYM], {"acronym": ""}, "en") == []
    assert resolve_properties([ACRONYM], {"acronym": None}, "en") == []


def test_language_map_selects_language():
    """Test languageMap values resolve to the requested language."""
    node = {"gloss": {"en": "Cat", "fr": "Chat"}}
    resolved = resolve_properties([GLOSS], node, "fr")
    assert [p.value for p in resolved] == ["Chat"]


def test_language_map_missing_language():
    """Test a missing language omits the property."""
    node = {"gloss": {"en": "Cat", "fr": "Chat"}}
    assert resolve_properties([GLOSS], node, "de") == []
    assert resolve_properties([GLOSS], {"gloss": {"en": ""}}, "en") == []


def test_language_map_array_selects_list():
    """Test languageMapArray values resolve to an ordered list."""
    node = {"synonyms": {"en": ["a", "b"], "fr": []}}
    resolved = resolve_properties([SYNONYMS], node, "en")
    assert len(resolved) == 1
    assert resolved[0].value == ["a", "b"]
    assert resolved[0].is_list


def test_language_map_array_empty_list_omitted():
    """Test an empty list for the language omits the property."""
    node = {"synonyms": {"en": ["a", "b"], "fr": []}}
    assert resolve_properties([SYNONYMS], node, "fr") == []
    assert resolve_properties([SYNONYMS], node, "de") == []


def test_language_map_array_non_list_omitted():
    """Test a scalar under a languageMapArray key is not rendered."""
    node = {"synonyms": {"en": "a"}}
    assert resolve_properties([SYNONYMS], node, "en") == []


def test_absent_inputs():
    """Test absent properties or node produce no entries."""
    node = {"acronym": "UN"}
    assert resolve_properties(None, node, "en") == []
    assert resolve_properties([], node, "en") == []
    assert resolve_properties([ACRONYM], None, "en") == []
    assert resolve_node([ACRONYM], None, "en") == []


def test_order_follows_properties():
    """Test output order equals descriptor order without deduplication."""
    node = {
        "acronym": "UN",
        "gloss": {"en": "United Nations"},
        "synonyms": {"en": ["UNO"]},
    }
    resolved = resolve_properties([SYNONYMS, ACRONYM, GLOSS, ACRONYM], node, "en")
    assert [p.id for p in resolved] == ["synonyms", "acronym", "gloss", "acronym"]


def test_unknown_type_uses_raw_value():
    """Test descriptors with an unrecognized type render the raw value."""
    prop = PropertyDescriptor.model_construct(
        id="code", label="Code", type="number", classes=("Concept",)
    )
    resolved = resolve_properties([prop], {"code": 42}, "en")
    assert [p.value for p in resolved] == [42]


def test_node_is_not_mutated():
    """Test resolution leaves the node untouched."""
    node = {"synonyms": {"en": ["a", "b"]}, "acronym": "UN"}
    snapshot = {"synonyms": {"en": ["a", "b"]}, "acronym": "UN"}
    resolved = resolve_properties([SYNONYMS, ACRONYM], node, "en")
    resolved[0].value.append("c")
    assert node == snapshot


def test_properties_for_and_resolve_node():
    """Test resolution by node type uses only applicable descriptors."""
    properties = [ACRONYM, OWNER]
    assert properties_for(properties, "Concept") == [ACRONYM]
    assert properties_for(properties, "ConceptScheme") == [OWNER]
    assert properties_for(properties, None) == []

    node = {"type": "Concept", "acronym": "UN", "owner": "Someone"}
    assert [p.id for p in resolve_node(properties, node, "en")] == ["acronym"]

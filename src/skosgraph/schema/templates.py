"""Fixed schema field lists for the vocabulary entity types."""

from typing import Dict, List, Tuple

# Language used for the auxiliary map types when none is configured
DEFAULT_LANGUAGE = "en"

# Custom property type -> schema type name; anything else is a String
PROPERTY_SCHEMA_TYPES: Dict[str, str] = {
    "plain": "String",
    "languageMap": "LanguageMap",
    "languageMapArray": "LanguageMapArray",
}
DEFAULT_SCHEMA_TYPE = "String"

# Suffix the content graph uses to store edges for linked fields
LINK_KEY_SUFFIX = "___NODE"


def linked(field_name: str, type_expr: str) -> Tuple[str, str]:
    """Field resolved by the host through its ``<field>___NODE`` edge key."""
    return field_name, f'{type_expr} @link(from: "{field_name}{LINK_KEY_SUFFIX}")'


COLLECTION_FIELDS: List[Tuple[str, str]] = [
    ("type", "String"),
    ("prefLabel", "LanguageMap"),
    linked("member", "[Concept]"),
]

CONCEPT_SCHEME_FIELDS: List[Tuple[str, str]] = [
    ("type", "String"),
    ("title", "LanguageMap"),
    ("dc_title", "LanguageMap"),
    ("prefLabel", "LanguageMap"),
    ("description", "LanguageMap"),
    ("dc_description", "LanguageMap"),
    linked("hasTopConcept", "[Concept]"),
    ("languages", "[String]"),
    ("issued", "String"),
    ("preferredNamespaceUri", "String"),
    ("preferredNamespacePrefix", "String"),
    ("publisher", "Concept"),
]

CONCEPT_FIELDS: List[Tuple[str, str]] = [
    ("type", "String"),
    ("prefLabel", "LanguageMap"),
    ("altLabel", "LanguageMapArray"),
    ("hiddenLabel", "LanguageMapArray"),
    ("definition", "LanguageMap"),
    ("note", "LanguageMapArray"),
    ("changeNote", "LanguageMapArray"),
    ("editorialNote", "LanguageMapArray"),
    ("historyNote", "LanguageMapArray"),
    ("scopeNote", "LanguageMapArray"),
    ("notation", "[String]"),
    ("example", "LanguageMap"),
    linked("topConceptOf", "[ConceptScheme]"),
    linked("narrower", "[Concept]"),
    linked("narrowerTransitive", "[Concept]"),
    ("narrowMatch", "[Concept]"),
    linked("broader", "Concept"),
    linked("broaderTransitive", "[Concept]"),
    ("broadMatch", "[Concept]"),
    linked("related", "[Concept]"),
    ("relatedMatch", "[Concept]"),
    ("closeMatch", "[Concept]"),
    ("exactMatch", "[Concept]"),
    linked("inScheme", "[ConceptScheme]"),
    ("inSchemeAll", "[ConceptScheme]"),
    ("hub", "String"),
    ("deprecated", "Boolean"),
    ("isReplacedBy", "[Concept]"),
]

# Emission order of the entity type blocks
ENTITY_TYPES: Dict[str, List[Tuple[str, str]]] = {
    "Collection": COLLECTION_FIELDS,
    "ConceptScheme": CONCEPT_SCHEME_FIELDS,
    "Concept": CONCEPT_FIELDS,
}

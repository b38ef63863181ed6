"""Language lookup for language-map values."""

from collections.abc import Mapping
from typing import Any, Callable, Iterable, List, Set
from skosgraph.config.logging import get_logger

logger = get_logger(__name__)


def i18n(language: str) -> Callable[[Any], Any]:
    """
    Build a lookup that extracts one language from a language map.

    The returned callable accepts a LanguageMap (code -> str) or a
    LanguageMapArray (code -> list of str) and returns the value stored for
    ``language``. A missing code or a value that is not a mapping yields
    ``""``; the lookup never raises.

    Args:
        language: Language code to extract, e.g. "en"

    Returns:
        Callable mapping a language map to its value for ``language``
    """

    def lookup(localized: Any) -> Any:
        if not isinstance(localized, Mapping):
            return ""
        value = localized.get(language)
        return "" if value is None else value

    return lookup


# Keys that mark an inline node record rather than a language map
RECORD_KEYS = ("id", "type")


def _is_language_map(value: Any) -> bool:
    """Whether a field value is a LanguageMap or LanguageMapArray."""
    if not isinstance(value, Mapping) or any(key in value for key in RECORD_KEYS):
        return False
    for code, localized in value.items():
        if not isinstance(code, str):
            return False
        if isinstance(localized, list):
            if not all(isinstance(item, str) for item in localized):
                return False
        elif not isinstance(localized, str):
            return False
    return True


def collect_languages(nodes: Iterable[Mapping[str, Any]]) -> List[str]:
    """
    Collect the language codes used by language-map fields of nodes.

    A field counts as a language map when it is a mapping of strings to
    strings or lists of strings. Inline node records, recognized by their
    ``id`` or ``type`` key, are skipped along with everything nested in them.

    Args:
        nodes: Node records as produced by the content graph

    Returns:
        Sorted list of distinct language codes
    """
    languages: Set[str] = set()
    for node in nodes:
        for value in node.values():
            if _is_language_map(value):
                languages.update(value.keys())
    logger.debug(f"Collected {len(languages)} languages from nodes")
    return sorted(languages)

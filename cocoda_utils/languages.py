"""Language resolution for multilingual label maps.

A label map is a mapping from language tag to content, e.g.
``{"en": "Music", "de": "Musik"}``. The tag ``"-"`` marks content without
linguistic meaning; it is never picked by the last-resort scan over the
map keys.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from cocoda_utils.options import Options, as_language_list, get_path

NO_LANGUAGE = "-"


def _fallback_languages(
    languages: Sequence[str] | None = None,
    options: Options | None = None,
) -> list[str]:
    if languages is not None:
        return as_language_list(languages)
    return (options or Options()).languages


def get_language(
    label_map: Mapping[str, Any] | None,
    language: str | None = None,
    languages: Sequence[str] | None = None,
    options: Options | None = None,
) -> str | None:
    """Return the language tag to use for ``label_map``.

    Candidates are ``language`` followed by the fallback languages (given
    explicitly or taken from ``options``). The first candidate that is a key
    of the map wins. Otherwise the first key other than ``"-"`` is returned,
    or ``None`` for an empty map.
    """
    if not label_map or not isinstance(label_map, Mapping):
        return None

    candidates = [language] if isinstance(language, str) and language else []
    candidates.extend(_fallback_languages(languages, options))
    for candidate in candidates:
        if candidate in label_map:
            return candidate

    for key in label_map:
        if key != NO_LANGUAGE:
            return key
    return None


def language_map_content(
    item: Any,
    prop: str | None = None,
    language: str | None = None,
    languages: Sequence[str] | None = None,
    options: Options | None = None,
) -> Any:
    """Return the content of the language map at ``item[prop]``.

    With no ``prop`` the item itself is treated as the language map.
    """
    label_map = get_path(item, prop) if prop else item
    if not label_map or not isinstance(label_map, Mapping):
        return None
    resolved = get_language(label_map, language, languages=languages, options=options)
    if resolved is None:
        return None
    return label_map.get(resolved)


def pref_label(
    item: Any,
    language: str | None = None,
    fallback_to_uri: bool = True,
    languages: Sequence[str] | None = None,
    options: Options | None = None,
) -> str:
    """Return the preferred label of an item.

    Falls back to the item's URI (unless ``fallback_to_uri`` is false), and
    finally to an empty string.
    """
    content = language_map_content(item, "prefLabel", language, languages=languages, options=options)
    if content and isinstance(content, str):
        return content
    uri = get_path(item, "uri")
    if fallback_to_uri and isinstance(uri, str) and uri:
        return uri
    return ""


def definition(
    item: Any,
    language: str | None = None,
    languages: Sequence[str] | None = None,
    options: Options | None = None,
) -> list[str]:
    """Return the definition of an item as a list of strings (possibly empty)."""
    content = language_map_content(item, "definition", language, languages=languages, options=options)
    if not content:
        return []
    if isinstance(content, str):
        return [content]
    if isinstance(content, (list, tuple)):
        return [value for value in content if isinstance(value, str)]
    return []

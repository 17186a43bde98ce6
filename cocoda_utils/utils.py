"""CocodaUtils — the helpers bound to one options store and scheme support."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from cocoda_utils import dates, ids, languages, mappings, registry
from cocoda_utils.annotations import annotations_helper
from cocoda_utils.notation import JskosSchemeSupport, SchemeSupport, notation as format_notation
from cocoda_utils.options import Options


class CocodaUtils:
    """Front-end helpers sharing one explicitly constructed ``Options`` store.

    An injected ``options`` store is shared as is, so later changes to it are
    seen by the helpers. Keyword overrides are applied to a private copy of
    ``options`` (or to the defaults)::

        utils = CocodaUtils(languages=["de", "en"])
        utils.pref_label(concept)
    """

    def __init__(
        self,
        options: Options | None = None,
        schemes: SchemeSupport | None = None,
        **overrides: Any,
    ):
        if options is None:
            options = Options()
        elif overrides:
            options = options.copy()
        options.update(overrides)
        self.options = options
        self.schemes = schemes or JskosSchemeSupport()

    # ── Options ──────────────────────────────────────────────────────

    def get_option(self, name: str) -> Any:
        return self.options.get(name)

    def set_option(self, name: str, value: Any) -> None:
        self.options.set(name, value)

    def license_badge(self, uri: str) -> str | None:
        """Return the badge image URL for a license URI, if one is known."""
        return (self.options.get("license_badges") or {}).get(uri)

    # ── Leaves ───────────────────────────────────────────────────────

    generate_id = staticmethod(ids.generate_id)
    hash = staticmethod(ids.hash_text)
    date_to_string = staticmethod(dates.date_to_string)
    registry_stored = staticmethod(registry.registry_stored)
    user_owns_mapping = staticmethod(mappings.user_owns_mapping)
    annotations_helper = annotations_helper

    # ── Languages and labels ─────────────────────────────────────────

    def get_language(
        self,
        label_map: Any,
        language: str | None = None,
        fallback_languages: Sequence[str] | None = None,
    ) -> str | None:
        return languages.get_language(
            label_map, language, languages=fallback_languages, options=self.options
        )

    def language_map_content(self, item: Any, prop: str | None = None, language: str | None = None) -> Any:
        return languages.language_map_content(item, prop, language, options=self.options)

    def pref_label(self, item: Any, language: str | None = None, fallback_to_uri: bool = True) -> str:
        return languages.pref_label(item, language, fallback_to_uri, options=self.options)

    def definition(self, item: Any, language: str | None = None) -> list[str]:
        return languages.definition(item, language, options=self.options)

    def notation(self, item: Any, type: str | None = None, adjust: bool = False) -> str:
        return format_notation(item, type, adjust, schemes=self.schemes)

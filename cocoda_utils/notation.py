"""Notation formatting for concepts and concept schemes."""

from __future__ import annotations

import html
import logging
import re
from typing import Any, Protocol
from urllib.parse import unquote

from cocoda_utils.options import get_path

logger = logging.getLogger(__name__)

CONCEPT_SCHEME_TYPE = "http://www.w3.org/2004/02/skos/core#ConceptScheme"

# Dewey Decimal Classification, 23rd edition
DDC_SCHEME = {"uri": "http://dewey.info/scheme/edition/e23/"}
DDC_NOTATION_LENGTH = 3
NOTATION_FILL_CLASS = "notation-fill text-mediumLightGrey"


class SchemeSupport(Protocol):
    """Scheme-aware capabilities supplied by the data model."""

    def schemes_equal(self, a: Any, b: Any) -> bool:
        ...

    def implied_notation(self, scheme: Any, uri: str) -> str | None:
        ...


def _scheme_uris(scheme: Any) -> set[str]:
    uris = set()
    uri = get_path(scheme, "uri")
    if isinstance(uri, str) and uri:
        uris.add(uri)
    identifier = get_path(scheme, "identifier") or []
    if isinstance(identifier, str):
        identifier = [identifier]
    if isinstance(identifier, (list, tuple)):
        uris.update(i for i in identifier if isinstance(i, str) and i)
    return uris


class JskosSchemeSupport:
    """Default scheme capabilities for JSKOS-shaped records.

    Two schemes are equal if they share their URI or any identifier. A
    concept URI implies a notation if it matches the scheme's ``uriPattern``.
    """

    def schemes_equal(self, a: Any, b: Any) -> bool:
        if not a or not b:
            return False
        uri_a, uri_b = get_path(a, "uri"), get_path(b, "uri")
        if uri_a and uri_a == uri_b:
            return True
        return bool(_scheme_uris(a) & _scheme_uris(b))

    def implied_notation(self, scheme: Any, uri: str) -> str | None:
        pattern = get_path(scheme, "uriPattern")
        if not isinstance(pattern, str) or not pattern or not uri:
            return None
        try:
            match = re.fullmatch(pattern, uri)
        except re.error:
            logger.debug("Invalid uriPattern %r for scheme %r", pattern, get_path(scheme, "uri"))
            return None
        if not match or not match.groups() or match.group(1) is None:
            return None
        return unquote(match.group(1))


def is_scheme(item: Any) -> bool:
    """Return True if the item is typed as a SKOS concept scheme."""
    types = get_path(item, "type")
    if isinstance(types, str):
        return types == CONCEPT_SCHEME_TYPE
    if isinstance(types, (list, tuple)):
        return CONCEPT_SCHEME_TYPE in types
    return False


def notation(
    item: Any,
    type: str | None = None,
    adjust: bool = False,
    schemes: SchemeSupport | None = None,
) -> str:
    """Return the notation of an item, or an empty string if it has none.

    Scheme notations are uppercased. Without an explicit notation, one is
    derived from the item's URI and its first scheme. With ``adjust``, DDC
    notations shorter than three characters are padded with a trailing
    ``<span>`` of zeros, so the result may contain HTML.
    """
    if not item:
        return ""
    schemes = schemes or JskosSchemeSupport()

    result = get_path(item, "notation.0")
    scheme = get_path(item, "inScheme.0")
    if result:
        result = str(result)
        if is_scheme(item) or type == "scheme":
            result = result.upper()
    else:
        uri = get_path(item, "uri")
        result = schemes.implied_notation(scheme, uri) if isinstance(uri, str) and uri and scheme else None
        if not result:
            return ""

    if adjust:
        fill = ""
        if schemes.schemes_equal(scheme, DDC_SCHEME):
            fill = "0" * max(DDC_NOTATION_LENGTH - len(result), 0)
        if fill:
            result = f"{html.escape(result)}<span class='{NOTATION_FILL_CLASS}'>{fill}</span>"
    return result

"""Helpers for annotation records and their creators.

A creator is either a bare URI string or a record with ``id`` and ``name``.
"""

from __future__ import annotations

from collections.abc import Iterable
from types import SimpleNamespace
from typing import Any

from cocoda_utils.options import get_path


def creator_uri(annotation: Any) -> str | None:
    creator = get_path(annotation, "creator")
    if isinstance(creator, str):
        return creator
    return get_path(creator, "id")


def creator_name(annotation: Any) -> str:
    name = get_path(annotation, "creator.name", "")
    return name if isinstance(name, str) else ""


def creator_matches(annotation: Any, uris: Iterable[str] | None = None) -> bool:
    """Return True if the annotation's creator is one of ``uris``."""
    if not annotation or not uris:
        return False
    uri = creator_uri(annotation)
    if not uri or not isinstance(uri, str):
        return False
    return any(candidate == uri for candidate in uris)


annotations_helper = SimpleNamespace(
    creator_uri=creator_uri,
    creator_name=creator_name,
    creator_matches=creator_matches,
)

"""Mapping ownership."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from cocoda_utils.options import get_path


def user_uris(user: Any) -> set[str]:
    """Return the user's own URI together with the URIs of all identities."""
    uris = set()
    uri = get_path(user, "uri")
    if isinstance(uri, str) and uri:
        uris.add(uri)
    identities = get_path(user, "identities")
    if isinstance(identities, Mapping):
        for identity in identities.values():
            identity_uri = get_path(identity, "uri")
            if isinstance(identity_uri, str) and identity_uri:
                uris.add(identity_uri)
    return uris


def user_owns_mapping(user: Any, mapping: Any) -> bool:
    """Return True if the mapping's first creator is the user or one of their identities."""
    if not user or not mapping:
        return False
    creator = get_path(mapping, "creator.0.uri")
    if not isinstance(creator, str) or not creator:
        return False
    return creator in user_uris(user)

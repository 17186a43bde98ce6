"""Registry descriptors — whether a registry stores its own records.

The ``stored`` flag is resolved in three tiers: an explicit value on the
registry itself, then the default declared by its provider type, then
``False``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Optional, Protocol, runtime_checkable


class Provider:
    """Base class for registry providers.

    Subclasses declare whether registries they back store records by
    default::

        class LocalMappingsProvider(Provider):
            stored = True
    """

    stored: ClassVar[Optional[bool]] = None


@runtime_checkable
class HasStoredOverride(Protocol):
    """A registry that may set ``stored`` explicitly."""

    stored: Optional[bool]


@runtime_checkable
class HasProviderDefault(Protocol):
    """A registry backed by a provider that may declare a ``stored`` default."""

    provider: Any


def stored_override(registry: Any) -> bool | None:
    """Return the registry's own ``stored`` value, if it sets one."""
    if isinstance(registry, Mapping):
        value = registry.get("stored")
    elif isinstance(registry, HasStoredOverride):
        value = registry.stored
    else:
        return None
    return value if isinstance(value, bool) else None


def provider_default(registry: Any) -> bool | None:
    """Return the ``stored`` default declared by the registry's provider type."""
    if isinstance(registry, Mapping):
        provider = registry.get("provider")
    elif isinstance(registry, HasProviderDefault):
        provider = registry.provider
    else:
        return None

    if isinstance(provider, type) and issubclass(provider, Provider):
        value = provider.stored
    elif isinstance(provider, Provider):
        value = type(provider).stored
    elif isinstance(provider, Mapping):
        value = provider.get("stored")
    else:
        return None
    return value if isinstance(value, bool) else None


def registry_stored(registry: Any) -> bool:
    """Return whether a registry stores its own records."""
    if not registry:
        return False
    value = stored_override(registry)
    if value is not None:
        return value
    value = provider_default(registry)
    if value is not None:
        return value
    return False

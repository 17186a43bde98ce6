"""Options — the configuration store shared by the language and label helpers.

An ``Options`` instance is constructed explicitly and handed to the functions
that need it. It holds arbitrary named values; the only option read by the
library itself is ``languages``, which may optionally be backed by an
external state object (e.g. a front-end store) so that the preferred
language list is always read live.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_MISSING = object()

DEFAULT_OPTIONS: dict[str, Any] = {
    "languages": ["en", "de"],
    # UI delay timings in milliseconds
    "delay": {"short": 250, "medium": 500, "long": 1000},
    "license_badges": {
        "http://creativecommons.org/publicdomain/zero/1.0/":
            "https://mirrors.creativecommons.org/presskit/buttons/80x15/svg/cc-zero.svg",
        "http://creativecommons.org/licenses/by/3.0/":
            "https://mirrors.creativecommons.org/presskit/buttons/80x15/svg/by.svg",
        "http://creativecommons.org/licenses/by/4.0/":
            "https://mirrors.creativecommons.org/presskit/buttons/80x15/svg/by.svg",
        "http://creativecommons.org/licenses/by-nc-nd/3.0/":
            "https://mirrors.creativecommons.org/presskit/buttons/80x15/svg/by-nc-nd.svg",
        "http://creativecommons.org/licenses/by-nc-nd/4.0/":
            "https://mirrors.creativecommons.org/presskit/buttons/80x15/svg/by-nc-nd.svg",
        "http://creativecommons.org/licenses/by-nc-sa/4.0/":
            "https://mirrors.creativecommons.org/presskit/buttons/80x15/svg/by-nc-sa.svg",
        "http://creativecommons.org/licenses/by-sa/4.0/":
            "https://mirrors.creativecommons.org/presskit/buttons/80x15/svg/by-sa.svg",
        "http://opendatacommons.org/licenses/odbl/1.0/":
            "https://img.shields.io/badge/License-ODbL-lightgrey.svg",
        "http://www.wtfpl.net/":
            "https://img.shields.io/badge/License-WTFPL-lightgrey.svg",
    },
}

CONFIG_KEY = "cocoda_utils"


class OptionsError(ValueError):
    """Raised when an options file cannot be loaded."""


def get_path(obj: Any, path: str | Sequence[str | int] | None, default: Any = None) -> Any:
    """Look up a nested value without raising.

    ``path`` is either a dotted string (``"creator.name"``, ``"inScheme.0"``)
    or a sequence of keys. Each segment is resolved against mappings (by key),
    sequences (by integer index) and plain objects (by attribute). Any missing
    segment, as well as a ``None`` result, yields ``default``.
    """
    if path is None or path == "":
        return default if obj is None else obj
    segments = path.split(".") if isinstance(path, str) else list(path)

    current = obj
    for segment in segments:
        if current is None:
            return default
        if isinstance(current, Mapping):
            current = current.get(segment, _MISSING)
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            try:
                current = current[int(segment)]
            except (ValueError, IndexError):
                return default
        else:
            current = getattr(current, str(segment), _MISSING)
        if current is _MISSING:
            return default
    return default if current is None else current


def as_language_list(value: Any) -> list[str]:
    """Normalize a language option to a list of tags; a bare tag becomes a one-element list."""
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, Sequence):
        return [v for v in value if isinstance(v, str)]
    return []


class Options:
    """Named option slots with get/set access.

    Every instance starts from a deep copy of ``DEFAULT_OPTIONS``. ``set``
    overwrites unconditionally; no validation is done on names or values.
    Instances are not synchronized, so callers sharing one across threads
    must serialize read-modify-write sequences themselves.
    """

    def __init__(
        self,
        values: Mapping[str, Any] | None = None,
        store: Any = None,
        languages_path: str | None = None,
    ):
        self._values: dict[str, Any] = copy.deepcopy(DEFAULT_OPTIONS)
        if values:
            self._values.update(values)
        self.store = store
        self.languages_path = languages_path

    def get(self, name: str, default: Any = None) -> Any:
        if name == "languages":
            live = self._live_languages()
            if live is not None:
                return live
        return self._values.get(name, default)

    def set(self, name: str, value: Any) -> None:
        self._values[name] = value

    def update(self, values: Mapping[str, Any]) -> None:
        for name, value in values.items():
            self.set(name, value)

    def copy(self) -> Options:
        """Return an independent copy sharing the same backing store."""
        clone = Options(store=self.store, languages_path=self.languages_path)
        clone._values = copy.deepcopy(self._values)
        return clone

    def as_dict(self) -> dict[str, Any]:
        data = dict(self._values)
        data["languages"] = self.languages
        return data

    def _live_languages(self) -> list[str] | None:
        if self.store is None or not self.languages_path:
            return None
        live = get_path(self.store, self.languages_path)
        return as_language_list(live) or None

    @property
    def languages(self) -> list[str]:
        """Preferred languages, read live from the backing store when configured."""
        live = self._live_languages()
        if live is not None:
            return live
        return as_language_list(self._values.get("languages"))

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def __repr__(self) -> str:
        return f"Options({self.as_dict()!r})"


def load_options(path: str | Path) -> Options:
    """Load options from a YAML file.

    The file may either hold the options at its top level or nest them below
    a ``cocoda_utils`` key. Values in the file override the defaults.
    """
    path = Path(path)
    if not path.exists():
        raise OptionsError(f"Options file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise OptionsError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise OptionsError(f"Options file must contain a mapping: {path}")
    if isinstance(data.get(CONFIG_KEY), dict):
        data = data[CONFIG_KEY]

    logger.debug("Loaded %d option(s) from %s", len(data), path)
    return Options(data)

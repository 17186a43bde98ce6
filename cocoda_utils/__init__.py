"""Utility functions for front-ends displaying knowledge organization data.

Provides helpers for:
- Options: an explicitly constructed store for preferred languages and UI settings
- Labels: language resolution, preferred labels, definitions and notations
- Ownership: annotation creators and mapping ownership checks
- Leaves: random IDs, FNV-1a hashing and localized dates
"""

from cocoda_utils.annotations import annotations_helper, creator_matches, creator_name, creator_uri
from cocoda_utils.dates import date_to_string
from cocoda_utils.ids import generate_id, hash_text
from cocoda_utils.languages import definition, get_language, language_map_content, pref_label
from cocoda_utils.mappings import user_owns_mapping
from cocoda_utils.notation import notation
from cocoda_utils.options import Options, OptionsError, get_path, load_options
from cocoda_utils.registry import Provider, registry_stored
from cocoda_utils.utils import CocodaUtils

__version__ = "0.1.0"

__all__ = [
    "CocodaUtils",
    "Options",
    "OptionsError",
    "Provider",
    "annotations_helper",
    "creator_matches",
    "creator_name",
    "creator_uri",
    "date_to_string",
    "definition",
    "generate_id",
    "get_language",
    "get_path",
    "hash_text",
    "language_map_content",
    "load_options",
    "notation",
    "pref_label",
    "registry_stored",
    "user_owns_mapping",
]

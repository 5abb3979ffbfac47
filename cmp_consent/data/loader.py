"""
Data loader for the CMP registry.
Loads the JSON registry and compiles cookie-name patterns into regex objects.

The JSON data file lives alongside this module.
"""

from __future__ import annotations

import json
import pathlib
import re
from collections.abc import Mapping
from typing import Any

from cmp_consent.consent import constants
from cmp_consent.models import consent, registry

# Resolve path to the data directory (same directory as this module)
_DATA_DIR = pathlib.Path(__file__).resolve().parent

_REGISTRY_FILE = "cmp-registry.json"

# ============================================================================
# JSON File Loading
# ============================================================================


def _load_json(relative_path: str) -> Any:
    """Load and parse a JSON file relative to the data directory.

    Raises:
        FileNotFoundError: If the JSON file does not exist.
        json.JSONDecodeError: If the file contains invalid JSON.
    """
    full_path = _DATA_DIR / relative_path
    if not full_path.exists():
        raise FileNotFoundError(f"Data file not found: {relative_path}")
    with open(full_path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as exc:
            raise json.JSONDecodeError(
                f"Invalid JSON in {relative_path}: {exc.msg}",
                exc.doc,
                exc.pos,
            ) from exc


# ============================================================================
# CMP Registry
# ============================================================================

_registry_cache: registry.CmpRegistry | None = None
_cookie_patterns_cache: list[re.Pattern[str]] | None = None


def get_cmp_registry() -> registry.CmpRegistry:
    """Get the CMP registry (lazy loaded and cached)."""
    global _registry_cache
    if _registry_cache is None:
        _registry_cache = registry.CmpRegistry.model_validate(_load_json(_REGISTRY_FILE))
    return _registry_cache


def get_cmp_entry(vendor_id: consent.VendorId) -> registry.CmpEntry | None:
    """Look up a CMP by its vendor id."""
    for entry in get_cmp_registry().cmps:
        if entry.id == vendor_id:
            return entry
    return None


def get_consent_cookie_names() -> list[str]:
    """Get the cookie names of every registered CMP."""
    return [entry.cookie_name for entry in get_cmp_registry().cmps]


def _get_cookie_patterns() -> list[re.Pattern[str]]:
    """Compile the consent-cookie name patterns once."""
    global _cookie_patterns_cache
    if _cookie_patterns_cache is None:
        _cookie_patterns_cache = [
            re.compile(pattern, re.IGNORECASE)
            for pattern in get_cmp_registry().consent_cookie_name_patterns
        ]
    return _cookie_patterns_cache


def is_consent_cookie(name: str) -> bool:
    """Return ``True`` if *name* is a cookie set by a CMP.

    Matches the registered consent cookies exactly and auxiliary
    CMP cookies (banner-closed markers, bulk tickets) by pattern.
    """
    if name in get_consent_cookie_names():
        return True
    return any(p.search(name) for p in _get_cookie_patterns())


def detect_cmps(cookie_map: Mapping[str, str]) -> list[registry.CmpEntry]:
    """Return the registered CMPs whose consent cookie is present.

    Results follow the decoder's evaluation order.
    """
    found: list[registry.CmpEntry] = []
    for vendor, cookie_name in constants.VENDOR_ORDER:
        if not cookie_map.get(cookie_name):
            continue
        entry = get_cmp_entry(vendor)
        if entry is not None:
            found.append(entry)
    return found

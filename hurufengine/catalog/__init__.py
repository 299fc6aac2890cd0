"""Named-entity catalog and its loader."""

from __future__ import annotations

from .loader import (
    DEFAULT_CATALOG_TABLE,
    Catalog,
    catalog_from_settings,
    default_catalog,
    load_bundled_datasets,
    load_catalog,
)
from .models import CatalogEntry, CatalogKind, IntentionTag, ModeOfAction

__all__ = [
    "Catalog",
    "CatalogEntry",
    "CatalogKind",
    "DEFAULT_CATALOG_TABLE",
    "IntentionTag",
    "ModeOfAction",
    "catalog_from_settings",
    "default_catalog",
    "load_bundled_datasets",
    "load_catalog",
]

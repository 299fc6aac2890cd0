"""Configuration models and loaders."""

from __future__ import annotations

from .settings import (
    CONFIG_FILENAME,
    CURRENT_SETTINGS_SCHEMA_VERSION,
    CatalogCfg,
    LettersCfg,
    ScoringCfg,
    Settings,
    config_path,
    default_settings,
    get_config_home,
    load_settings,
)

__all__ = [
    "CONFIG_FILENAME",
    "CURRENT_SETTINGS_SCHEMA_VERSION",
    "CatalogCfg",
    "LettersCfg",
    "ScoringCfg",
    "Settings",
    "config_path",
    "default_settings",
    "get_config_home",
    "load_settings",
]

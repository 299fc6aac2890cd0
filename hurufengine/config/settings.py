"""Configuration models and helpers for hurufengine settings."""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from ..errors import ConfigurationError

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

LOG = logging.getLogger(__name__)

CURRENT_SETTINGS_SCHEMA_VERSION = 1
CONFIG_FILENAME = "config.yaml"

_TIER_ORDER = ("excellent", "very_good", "good", "moderate")
_METHOD_IDS = (
    "spiritual_destiny",
    "elemental_temperament",
    "planetary_cosmic",
    "daily_interaction",
)


def _validate_bands(data: Dict[str, int], required: tuple[str, ...], label: str) -> Dict[str, int]:
    missing = [key for key in required if key not in data]
    if missing:
        raise ValueError(f"{label} is missing bands: {', '.join(missing)}")
    for key, value in data.items():
        if not 0 <= int(value) <= 100:
            raise ValueError(f"{label}.{key} must be within 0..100, got {value}")
    return {key: int(value) for key, value in data.items()}


class LettersCfg(BaseModel):
    """Letter-value convention used when callers do not inject one."""

    table: str = "maghribi"

    @field_validator("table", mode="before")
    @classmethod
    def _normalise_table(cls, value: str) -> str:
        return str(value).strip().lower()


class ScoringCfg(BaseModel):
    """Score bands, weights and thresholds of the resonance methods."""

    severity_scores: Dict[str, int] = Field(
        default_factory=lambda: {"favorable": 85, "cautionary": 60, "unfavorable": 35}
    )
    relation_scores: Dict[str, int] = Field(
        default_factory=lambda: {
            "harmonious": 90,
            "supportive": 80,
            "neutral": 60,
            "challenging": 35,
        }
    )
    friendliness_scores: Dict[str, int] = Field(
        default_factory=lambda: {"friendly": 85, "neutral": 60, "opposing": 35}
    )
    overlap_span: int = Field(default=10, ge=0, le=50)
    method_weights: Dict[str, float] = Field(
        default_factory=lambda: {method: 1.0 for method in _METHOD_IDS}
    )
    tier_thresholds: Dict[str, int] = Field(
        default_factory=lambda: {"excellent": 85, "very_good": 75, "good": 65, "moderate": 50}
    )
    tension_threshold: int = Field(default=20, ge=1, le=100)

    @field_validator("severity_scores")
    @classmethod
    def _check_severity(cls, data: Dict[str, int]) -> Dict[str, int]:
        bands = _validate_bands(data, ("favorable", "cautionary", "unfavorable"), "severity_scores")
        if not bands["favorable"] >= bands["cautionary"] >= bands["unfavorable"]:
            raise ValueError("severity_scores must not increase with severity")
        return bands

    @field_validator("relation_scores")
    @classmethod
    def _check_relations(cls, data: Dict[str, int]) -> Dict[str, int]:
        return _validate_bands(
            data, ("harmonious", "supportive", "neutral", "challenging"), "relation_scores"
        )

    @field_validator("friendliness_scores")
    @classmethod
    def _check_friendliness(cls, data: Dict[str, int]) -> Dict[str, int]:
        return _validate_bands(data, ("friendly", "neutral", "opposing"), "friendliness_scores")

    @field_validator("method_weights")
    @classmethod
    def _check_weights(cls, data: Dict[str, float]) -> Dict[str, float]:
        unknown = sorted(set(data) - set(_METHOD_IDS))
        if unknown:
            raise ValueError(f"unknown methods in method_weights: {', '.join(unknown)}")
        weights = {method: float(data.get(method, 1.0)) for method in _METHOD_IDS}
        if any(value < 0 for value in weights.values()):
            raise ValueError("method_weights must be non-negative")
        if sum(weights.values()) <= 0:
            raise ValueError("method_weights must not all be zero")
        return weights

    @model_validator(mode="after")
    def _check_thresholds(self) -> "ScoringCfg":
        thresholds = _validate_bands(self.tier_thresholds, _TIER_ORDER, "tier_thresholds")
        ordered = [thresholds[tier] for tier in _TIER_ORDER]
        if any(upper <= lower for upper, lower in zip(ordered, ordered[1:])):
            raise ValueError("tier_thresholds must strictly decrease from excellent to moderate")
        return self


class CatalogCfg(BaseModel):
    """Location and letter convention of the named-entity catalog."""

    path: Optional[Path] = None
    letter_table: str = "mashriqi"

    @field_validator("letter_table", mode="before")
    @classmethod
    def _normalise_table(cls, value: str) -> str:
        return str(value).strip().lower()


class Settings(BaseModel):
    """Top-level settings model read from disk."""

    schema_version: int = Field(
        default=CURRENT_SETTINGS_SCHEMA_VERSION,
        ge=1,
        description="Version marker for configuration payloads.",
    )
    letters: LettersCfg = Field(default_factory=LettersCfg)
    scoring: ScoringCfg = Field(default_factory=ScoringCfg)
    catalog: CatalogCfg = Field(default_factory=CatalogCfg)


def get_config_home() -> Path:
    """Return the directory where settings are looked up."""

    return Path(os.environ.get("HURUFENGINE_HOME", str(Path.home() / ".hurufengine")))


def config_path() -> Path:
    return get_config_home() / CONFIG_FILENAME


def default_settings() -> Settings:
    """Instantiate a Settings object populated with defaults."""

    return Settings()


def _coerce_schema_version(raw: object) -> int:
    try:
        value = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 1
    return max(1, value)


def _upgrade_settings_payload(
    data: dict[str, object], *, schema_version: int
) -> dict[str, object]:
    upgraded = deepcopy(data)
    if schema_version > CURRENT_SETTINGS_SCHEMA_VERSION:
        raise ConfigurationError(
            f"settings schema {schema_version} is newer than supported "
            f"version {CURRENT_SETTINGS_SCHEMA_VERSION}"
        )
    upgraded["schema_version"] = CURRENT_SETTINGS_SCHEMA_VERSION
    return upgraded


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from ``path`` or the config home, defaulting when absent.

    Settings are never written back; a missing file simply yields defaults.
    """

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        LOG.debug("no settings at %s, using defaults", source_path)
        return default_settings()
    try:
        with source_path.open("r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"{source_path} is not valid YAML: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{source_path} must contain a mapping")
    schema_version = _coerce_schema_version(raw.get("schema_version"))
    data = _upgrade_settings_payload(raw, schema_version=schema_version)
    try:
        settings = Settings(**data)
    except ValidationError as exc:
        raise ConfigurationError(
            f"invalid settings in {source_path}", errors=exc.errors()
        ) from exc
    LOG.debug("loaded settings from %s", source_path)
    return settings

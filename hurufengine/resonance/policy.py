"""Scoring policy: score bands, weights and tier thresholds."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from ..config.settings import ScoringCfg, Settings
from ..errors import ConfigurationError
from .models import TIER_ORDER, MethodId, QualityTier

__all__ = [
    "ScoringPolicy",
    "default_scoring_policy",
    "load_scoring_policy",
]


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(result.get(key), Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


@dataclass(frozen=True)
class ScoringPolicy:
    """Immutable view of :class:`ScoringCfg` used by methods and aggregation."""

    severity_scores: Mapping[str, int]
    relation_scores: Mapping[str, int]
    friendliness_scores: Mapping[str, int]
    overlap_span: int
    method_weights: Mapping[str, float]
    tier_thresholds: Mapping[str, int]
    tension_threshold: int

    @classmethod
    def from_cfg(cls, cfg: ScoringCfg) -> "ScoringPolicy":
        return cls(
            severity_scores=MappingProxyType(dict(cfg.severity_scores)),
            relation_scores=MappingProxyType(dict(cfg.relation_scores)),
            friendliness_scores=MappingProxyType(dict(cfg.friendliness_scores)),
            overlap_span=cfg.overlap_span,
            method_weights=MappingProxyType(dict(cfg.method_weights)),
            tier_thresholds=MappingProxyType(dict(cfg.tier_thresholds)),
            tension_threshold=cfg.tension_threshold,
        )

    def tier_for(self, score: float) -> QualityTier:
        for tier in TIER_ORDER[:-1]:
            if score >= self.tier_thresholds[str(tier)]:
                return tier
        return QualityTier.CHALLENGING

    def weight_for(self, method_id: MethodId | str) -> float:
        return float(self.method_weights.get(str(method_id), 1.0))

    def to_mapping(self) -> dict[str, Any]:
        return {
            "severity_scores": dict(self.severity_scores),
            "relation_scores": dict(self.relation_scores),
            "friendliness_scores": dict(self.friendliness_scores),
            "overlap_span": self.overlap_span,
            "method_weights": dict(self.method_weights),
            "tier_thresholds": dict(self.tier_thresholds),
            "tension_threshold": self.tension_threshold,
        }


@lru_cache(maxsize=1)
def default_scoring_policy() -> ScoringPolicy:
    return ScoringPolicy.from_cfg(ScoringCfg())


def load_scoring_policy(
    *,
    settings: Settings | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> ScoringPolicy:
    """Return a scoring policy built from ``settings`` plus ``overrides``.

    ``overrides`` are merged recursively, so a caller can replace a single
    band (``{"relation_scores": {"neutral": 55}}``) without restating the rest.
    """

    base = (settings.scoring if settings is not None else ScoringCfg()).model_dump()
    merged = _deep_merge(base, overrides or {})
    try:
        cfg = ScoringCfg.model_validate(merged)
    except ValidationError as exc:
        raise ConfigurationError("invalid scoring policy", errors=exc.errors()) from exc
    return ScoringPolicy.from_cfg(cfg)

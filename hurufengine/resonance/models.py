"""Result records shared by the resonance methods."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any

__all__ = [
    "MethodId",
    "QualityTier",
    "ResonanceMethodResult",
    "TIER_ORDER",
]


class MethodId(StrEnum):
    SPIRITUAL_DESTINY = "spiritual_destiny"
    ELEMENTAL_TEMPERAMENT = "elemental_temperament"
    PLANETARY_COSMIC = "planetary_cosmic"
    DAILY_INTERACTION = "daily_interaction"


class QualityTier(StrEnum):
    EXCELLENT = "excellent"
    VERY_GOOD = "very_good"
    GOOD = "good"
    MODERATE = "moderate"
    CHALLENGING = "challenging"

    @property
    def rank(self) -> int:
        """Position in :data:`TIER_ORDER`; lower is better."""

        return TIER_ORDER.index(self)


TIER_ORDER: tuple[QualityTier, ...] = (
    QualityTier.EXCELLENT,
    QualityTier.VERY_GOOD,
    QualityTier.GOOD,
    QualityTier.MODERATE,
    QualityTier.CHALLENGING,
)


@dataclass(frozen=True)
class ResonanceMethodResult:
    """Score and narrative keys produced by one resonance method."""

    method_id: MethodId
    score: int
    quality_tier: QualityTier
    explanation_tokens: tuple[str, ...]
    raw_inputs: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not 0 <= self.score <= 100:
            raise ValueError(f"method score must be within 0..100, got {self.score}")
        object.__setattr__(self, "raw_inputs", MappingProxyType(dict(self.raw_inputs)))

    def to_payload(self) -> dict[str, Any]:
        return {
            "method_id": str(self.method_id),
            "score": self.score,
            "quality_tier": str(self.quality_tier),
            "explanation_tokens": list(self.explanation_tokens),
            "raw_inputs": {
                key: str(value) if isinstance(value, StrEnum) else value
                for key, value in self.raw_inputs.items()
            },
        }

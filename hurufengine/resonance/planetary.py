"""Planetary-cosmic method."""

from __future__ import annotations

from ..classification import planet_friendliness, planetary_ruler_of, zodiac_sign_of
from ..fingerprint import NameFingerprint
from .models import MethodId, ResonanceMethodResult
from .policy import ScoringPolicy, default_scoring_policy

__all__ = ["planetary_cosmic"]


def planetary_cosmic(
    first: NameFingerprint,
    second: NameFingerprint,
    *,
    policy: ScoringPolicy | None = None,
) -> ResonanceMethodResult:
    """Score the friendliness of the rulers of two zodiacal remainders."""

    active = policy or default_scoring_policy()
    ruler_a = planetary_ruler_of(first.zodiacal_remainder)
    ruler_b = planetary_ruler_of(second.zodiacal_remainder)
    friendliness = planet_friendliness(ruler_a, ruler_b)
    score = active.friendliness_scores[str(friendliness)]
    return ResonanceMethodResult(
        method_id=MethodId.PLANETARY_COSMIC,
        score=score,
        quality_tier=active.tier_for(score),
        explanation_tokens=(
            f"resonance.planetary.{friendliness}",
            f"resonance.planetary.ruler.{ruler_a}",
            f"resonance.planetary.ruler.{ruler_b}",
        ),
        raw_inputs={
            "zodiacal_remainders": (first.zodiacal_remainder, second.zodiacal_remainder),
            "signs": (
                zodiac_sign_of(first.zodiacal_remainder),
                zodiac_sign_of(second.zodiacal_remainder),
            ),
            "rulers": (ruler_a, ruler_b),
            "friendliness": friendliness,
        },
    )

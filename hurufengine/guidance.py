"""Aggregation of resonance method results into a score, tier and guidance keys.

Tokens are abstract template identifiers. Resolving them to prose is left to
the presentation layer; the relationship context only chooses which template
bucket a token points into and never alters any score.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from .arithmetic import clamp_score
from .resonance import MethodId, QualityTier, ResonanceMethodResult
from .resonance.policy import ScoringPolicy, default_scoring_policy
from .resonance.spiritual import SOUL_ARCHETYPES

__all__ = [
    "Aggregate",
    "RelationshipContext",
    "aggregate",
    "overall_score",
    "soul_meaning_tokens",
    "tension_tokens",
]

LOG = logging.getLogger(__name__)


class RelationshipContext(StrEnum):
    UNIVERSAL = "universal"
    MARRIAGE = "marriage"
    FRIENDSHIP = "friendship"
    FAMILY = "family"
    WORK = "work"


@dataclass(frozen=True)
class Aggregate:
    overall_score: int
    overall_tier: QualityTier
    summary_tokens: tuple[str, ...]
    recommendation_tokens: tuple[str, ...]

    def to_payload(self) -> dict[str, object]:
        return {
            "overall_score": self.overall_score,
            "overall_tier": str(self.overall_tier),
            "summary_tokens": list(self.summary_tokens),
            "recommendation_tokens": list(self.recommendation_tokens),
        }


def overall_score(
    results: Sequence[ResonanceMethodResult], *, policy: ScoringPolicy | None = None
) -> int:
    """Weighted mean of method scores, rounded half-up and clamped to ``[0, 100]``."""

    if not results:
        raise ValueError("at least one method result is required")
    active = policy or default_scoring_policy()
    weights = [active.weight_for(result.method_id) for result in results]
    if sum(weights) <= 0:
        LOG.warning(
            "all weights are zero for %s; using an equal-weight mean",
            [str(result.method_id) for result in results],
        )
        weights = [1.0] * len(results)
    mean = sum(w * r.score for w, r in zip(weights, results)) / sum(weights)
    return clamp_score(mean)


def tension_tokens(
    results: Sequence[ResonanceMethodResult],
    score: int,
    *,
    policy: ScoringPolicy | None = None,
) -> tuple[str, ...]:
    """Flag methods that deviate sharply from the aggregate ``score``."""

    active = policy or default_scoring_policy()
    threshold = active.tension_threshold
    outliers = [r for r in results if abs(r.score - score) >= threshold]
    if not outliers:
        return ()
    tokens: list[str] = []
    high = max(outliers, key=lambda r: r.score - score)
    low = min(outliers, key=lambda r: r.score - score)
    if high.score > score and low.score < score:
        tokens.append(f"guidance.tension.{high.method_id}.over.{low.method_id}")
    for result in outliers:
        direction = "high" if result.score > score else "low"
        tokens.append(f"guidance.tension.{result.method_id}.{direction}")
    return tuple(tokens)


def soul_meaning_tokens(
    number: int, context: RelationshipContext | str
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Return ``(summary, recommendation)`` tokens for a soul number in ``context``."""

    archetype = SOUL_ARCHETYPES[number]
    bucket = RelationshipContext(context)
    if bucket is RelationshipContext.MARRIAGE:
        return (
            archetype.tokens("title", "marriageOutlook"),
            archetype.tokens("watchOut", "keyToSuccess"),
        )
    prefix = f"compatibility.soul.meanings.{bucket}.{number}"
    return (
        (f"{prefix}.short", f"{prefix}.meaning"),
        (f"{prefix}.watchOut", f"{prefix}.keyToSuccess"),
    )


def aggregate(
    results: Sequence[ResonanceMethodResult],
    *,
    policy: ScoringPolicy | None = None,
    context: RelationshipContext | str = RelationshipContext.UNIVERSAL,
) -> Aggregate:
    active = policy or default_scoring_policy()
    bucket = RelationshipContext(context)
    score = overall_score(results, policy=active)
    tier = active.tier_for(score)

    summary = [f"guidance.summary.{tier}", f"guidance.summary.{bucket}.{tier}"]
    summary.extend(tension_tokens(results, score, policy=active))
    recommendations = [f"guidance.recommend.{bucket}.{tier}"]
    moderate_floor = active.tier_thresholds[str(QualityTier.MODERATE)]
    for result in results:
        if result.score < moderate_floor:
            recommendations.append(f"guidance.recommend.{result.method_id}.strengthen")

    for result in results:
        if result.method_id == MethodId.SPIRITUAL_DESTINY:
            extra_summary, extra_recommend = soul_meaning_tokens(
                int(result.raw_inputs["soul_number"]), bucket
            )
            summary.extend(extra_summary)
            recommendations.extend(extra_recommend)
            break

    LOG.debug("aggregate score=%d tier=%s context=%s", score, tier, bucket)
    return Aggregate(
        overall_score=score,
        overall_tier=tier,
        summary_tokens=tuple(summary),
        recommendation_tokens=tuple(recommendations),
    )

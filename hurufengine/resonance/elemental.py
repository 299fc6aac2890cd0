"""Elemental-temperament method."""

from __future__ import annotations

from ..classification import element_of_elemental_remainder, elemental_relation
from ..fingerprint import NameFingerprint
from .models import MethodId, ResonanceMethodResult
from .policy import ScoringPolicy, default_scoring_policy

__all__ = ["elemental_temperament"]


def elemental_temperament(
    first: NameFingerprint,
    second: NameFingerprint,
    *,
    policy: ScoringPolicy | None = None,
) -> ResonanceMethodResult:
    """Score the relation between the elements of two elemental remainders."""

    active = policy or default_scoring_policy()
    element_a = element_of_elemental_remainder(first.elemental_remainder)
    element_b = element_of_elemental_remainder(second.elemental_remainder)
    relation = elemental_relation(element_a, element_b)
    score = active.relation_scores[str(relation)]
    return ResonanceMethodResult(
        method_id=MethodId.ELEMENTAL_TEMPERAMENT,
        score=score,
        quality_tier=active.tier_for(score),
        explanation_tokens=(
            f"resonance.elemental.relation.{relation}",
            f"resonance.elemental.element.{element_a}",
            f"resonance.elemental.element.{element_b}",
        ),
        raw_inputs={
            "elemental_remainders": (first.elemental_remainder, second.elemental_remainder),
            "elements": (element_a, element_b),
            "relation": relation,
        },
    )

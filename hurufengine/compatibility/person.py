"""Person to person compatibility."""

from __future__ import annotations

import logging

from ..classification import Orientation, element_of_elemental_remainder, orientation_of
from ..fingerprint import NameFingerprint
from ..guidance import RelationshipContext, aggregate
from ..resonance import (
    daily_interaction,
    elemental_temperament,
    planetary_cosmic,
    spiritual_destiny,
)
from ..resonance.policy import ScoringPolicy, default_scoring_policy
from .models import PersonPersonEvaluation

__all__ = ["evaluate_person_person_compatibility", "orientation_tokens"]

LOG = logging.getLogger(__name__)


def orientation_tokens(first: Orientation, second: Orientation) -> tuple[str, ...]:
    """Dominance when both names face the same way, reflection otherwise."""

    interaction = "dominance" if first is second else "reflection"
    return (
        f"guidance.orientation.{interaction}",
        f"guidance.orientation.{first}.{second}",
    )


def evaluate_person_person_compatibility(
    fingerprint_a: NameFingerprint,
    fingerprint_b: NameFingerprint,
    context: RelationshipContext | str = RelationshipContext.UNIVERSAL,
    *,
    policy: ScoringPolicy | None = None,
) -> PersonPersonEvaluation:
    """Run all four resonance methods on two fingerprints and aggregate them.

    ``context`` only selects narrative token buckets; scores are identical
    for every context.
    """

    active = policy or default_scoring_policy()
    bucket = RelationshipContext(context)
    if fingerprint_a.table_name != fingerprint_b.table_name:
        LOG.warning(
            "comparing fingerprints built with different tables: %s, %s",
            fingerprint_a.table_name,
            fingerprint_b.table_name,
        )
    results = (
        spiritual_destiny(fingerprint_a, fingerprint_b, policy=active),
        elemental_temperament(fingerprint_a, fingerprint_b, policy=active),
        planetary_cosmic(fingerprint_a, fingerprint_b, policy=active),
        daily_interaction(fingerprint_a, fingerprint_b, policy=active),
    )
    summary = aggregate(results, policy=active, context=bucket)
    orientations = (
        orientation_of(element_of_elemental_remainder(fingerprint_a.elemental_remainder)),
        orientation_of(element_of_elemental_remainder(fingerprint_b.elemental_remainder)),
    )
    return PersonPersonEvaluation(
        fingerprint_a=fingerprint_a,
        fingerprint_b=fingerprint_b,
        context=bucket,
        orientations=orientations,
        method_results=results,
        overall_score=summary.overall_score,
        overall_tier=summary.overall_tier,
        summary_tokens=summary.summary_tokens + orientation_tokens(*orientations),
        recommendation_tokens=summary.recommendation_tokens,
    )

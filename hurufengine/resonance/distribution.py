"""Daily-interaction method over the elemental letter distribution of names."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from ..arithmetic import clamp_score
from ..classification import (
    ELEMENT_PRIORITY,
    Element,
    elemental_relation,
    letter_element,
)
from ..fingerprint import NameFingerprint
from .models import MethodId, ResonanceMethodResult
from .policy import ScoringPolicy, default_scoring_policy

__all__ = [
    "daily_interaction",
    "dominant_element",
    "element_histogram",
    "histogram_overlap",
]


def element_histogram(text: str) -> Mapping[Element, int]:
    """Count the letters of ``text`` per element; unclassified characters are skipped."""

    counts = {element: 0 for element in ELEMENT_PRIORITY}
    for char in text:
        element = letter_element(char)
        if element is not None:
            counts[element] += 1
    return MappingProxyType(counts)


def dominant_element(histogram: Mapping[Element, int]) -> Element:
    """Return the most frequent element, preferring fire, air, water, earth on ties."""

    best = ELEMENT_PRIORITY[0]
    for element in ELEMENT_PRIORITY[1:]:
        if histogram.get(element, 0) > histogram.get(best, 0):
            best = element
    return best


def histogram_overlap(first: Mapping[Element, int], second: Mapping[Element, int]) -> float:
    """Return the intersection of the two proportion vectors, within ``[0, 1]``."""

    total_a = sum(first.values())
    total_b = sum(second.values())
    if not total_a or not total_b:
        return 0.0
    overlap = sum(
        min(first.get(element, 0) / total_a, second.get(element, 0) / total_b)
        for element in ELEMENT_PRIORITY
    )
    return min(1.0, overlap)


def daily_interaction(
    first: NameFingerprint,
    second: NameFingerprint,
    *,
    policy: ScoringPolicy | None = None,
) -> ResonanceMethodResult:
    active = policy or default_scoring_policy()
    histogram_a = element_histogram(first.normalized_text)
    histogram_b = element_histogram(second.normalized_text)
    dominant_a = dominant_element(histogram_a)
    dominant_b = dominant_element(histogram_b)
    relation = elemental_relation(dominant_a, dominant_b)
    overlap = histogram_overlap(histogram_a, histogram_b)
    base = active.relation_scores[str(relation)]
    score = clamp_score(base + (overlap - 0.5) * 2 * active.overlap_span)
    return ResonanceMethodResult(
        method_id=MethodId.DAILY_INTERACTION,
        score=score,
        quality_tier=active.tier_for(score),
        explanation_tokens=(
            f"resonance.daily.relation.{relation}",
            f"resonance.daily.dominant.{dominant_a}",
            f"resonance.daily.dominant.{dominant_b}",
        ),
        raw_inputs={
            "histograms": (
                {str(key): value for key, value in histogram_a.items()},
                {str(key): value for key, value in histogram_b.items()},
            ),
            "dominants": (dominant_a, dominant_b),
            "relation": relation,
            "overlap": round(overlap, 4),
            "base_score": base,
        },
    )

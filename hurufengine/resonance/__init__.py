"""The four resonance methods and their scoring policy."""

from __future__ import annotations

from .distribution import (
    daily_interaction,
    dominant_element,
    element_histogram,
    histogram_overlap,
)
from .elemental import elemental_temperament
from .models import TIER_ORDER, MethodId, QualityTier, ResonanceMethodResult
from .planetary import planetary_cosmic
from .policy import ScoringPolicy, default_scoring_policy, load_scoring_policy
from .spiritual import (
    SOUL_ARCHETYPES,
    Severity,
    SoulArchetype,
    soul_number,
    spiritual_destiny,
)

__all__ = [
    "MethodId",
    "QualityTier",
    "ResonanceMethodResult",
    "SOUL_ARCHETYPES",
    "ScoringPolicy",
    "Severity",
    "SoulArchetype",
    "TIER_ORDER",
    "daily_interaction",
    "default_scoring_policy",
    "dominant_element",
    "element_histogram",
    "elemental_temperament",
    "histogram_overlap",
    "load_scoring_policy",
    "planetary_cosmic",
    "soul_number",
    "spiritual_destiny",
]

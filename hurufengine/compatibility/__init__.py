"""Compatibility evaluations for people, catalog entries and intentions."""

from __future__ import annotations

from .catalog_entry import (
    evaluate_person_catalog_entry_compatibility,
    manifestation_speed,
    name_action,
)
from .intention import (
    RELATED_INTENTIONS,
    assess_catalog_entry_for_intention,
    best_catalog_entry_for_intention,
    evaluate_catalog_entry_intention_compatibility,
    relevance_components,
)
from .models import (
    CatalogEntryIntentionEvaluation,
    CompatibilityEvaluation,
    IntentionAlignment,
    IntentionMatch,
    Manifestation,
    NameAction,
    PersonCatalogEntryEvaluation,
    PersonPersonEvaluation,
    SubjectKind,
)
from .person import evaluate_person_person_compatibility

__all__ = [
    "CatalogEntryIntentionEvaluation",
    "CompatibilityEvaluation",
    "IntentionAlignment",
    "IntentionMatch",
    "Manifestation",
    "NameAction",
    "PersonCatalogEntryEvaluation",
    "PersonPersonEvaluation",
    "RELATED_INTENTIONS",
    "SubjectKind",
    "assess_catalog_entry_for_intention",
    "best_catalog_entry_for_intention",
    "evaluate_catalog_entry_intention_compatibility",
    "evaluate_person_catalog_entry_compatibility",
    "evaluate_person_person_compatibility",
    "manifestation_speed",
    "name_action",
    "relevance_components",
]

"""Numerological resonance and compatibility engine for Arabic names."""

from __future__ import annotations

from .catalog import (
    Catalog,
    CatalogEntry,
    IntentionTag,
    ModeOfAction,
    default_catalog,
    load_bundled_datasets,
    load_catalog,
)
from .classification import Element, Planet, elemental_relation, planet_friendliness
from .compatibility import (
    CatalogEntryIntentionEvaluation,
    CompatibilityEvaluation,
    IntentionMatch,
    PersonCatalogEntryEvaluation,
    PersonPersonEvaluation,
    SubjectKind,
    assess_catalog_entry_for_intention,
    evaluate_catalog_entry_intention_compatibility,
    evaluate_person_catalog_entry_compatibility,
    evaluate_person_person_compatibility,
)
from .config import Settings, load_settings
from .errors import ConfigurationError, InvalidInputError, UnknownEntityError
from .fingerprint import NameFingerprint, compute_fingerprint, scriptural_pointer
from .guidance import RelationshipContext, aggregate
from .letters import MAGHRIBI, MASHRIQI, LetterValueTable, letter_table
from .resonance import MethodId, QualityTier, ResonanceMethodResult, soul_number

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "CatalogEntry",
    "CatalogEntryIntentionEvaluation",
    "CompatibilityEvaluation",
    "ConfigurationError",
    "Element",
    "IntentionMatch",
    "IntentionTag",
    "InvalidInputError",
    "LetterValueTable",
    "MAGHRIBI",
    "MASHRIQI",
    "MethodId",
    "ModeOfAction",
    "NameFingerprint",
    "PersonCatalogEntryEvaluation",
    "PersonPersonEvaluation",
    "Planet",
    "QualityTier",
    "RelationshipContext",
    "ResonanceMethodResult",
    "Settings",
    "SubjectKind",
    "UnknownEntityError",
    "__version__",
    "aggregate",
    "assess_catalog_entry_for_intention",
    "compute_fingerprint",
    "default_catalog",
    "elemental_relation",
    "evaluate_catalog_entry_intention_compatibility",
    "evaluate_person_catalog_entry_compatibility",
    "evaluate_person_person_compatibility",
    "letter_table",
    "load_bundled_datasets",
    "load_catalog",
    "load_settings",
    "planet_friendliness",
    "scriptural_pointer",
    "soul_number",
]

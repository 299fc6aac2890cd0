"""Evaluation records, one variant per subject kind."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Literal

from ..catalog import CatalogEntry, IntentionTag
from ..classification import Element, Orientation
from ..fingerprint import NameFingerprint, ScripturalPointer
from ..guidance import RelationshipContext
from ..resonance import QualityTier, ResonanceMethodResult

__all__ = [
    "CatalogEntryIntentionEvaluation",
    "CompatibilityEvaluation",
    "IntentionAlignment",
    "IntentionMatch",
    "Manifestation",
    "NameAction",
    "PersonCatalogEntryEvaluation",
    "PersonPersonEvaluation",
    "SubjectKind",
]


class SubjectKind(StrEnum):
    PERSON_PERSON = "person-person"
    PERSON_CATALOG_ENTRY = "person-catalogEntry"
    CATALOG_ENTRY_INTENTION = "catalogEntry-intention"


class NameAction(StrEnum):
    """How a catalog entry's element acts on the person's element."""

    STRENGTHENS = "strengthens"
    STABILIZES = "stabilizes"
    TEMPERS = "tempers"
    CHALLENGES = "challenges"


class Manifestation(StrEnum):
    FAST = "fast"
    DELAYED = "delayed"
    SUBTLE = "subtle"


class IntentionAlignment(StrEnum):
    OPTIMAL = "optimal"
    SUITABLE = "suitable"
    NOT_RECOMMENDED = "not_recommended"
    NEUTRAL = "neutral"


def _common_payload(evaluation: Any) -> dict[str, Any]:
    return {
        "subject_kind": str(evaluation.subject_kind),
        "method_results": [result.to_payload() for result in evaluation.method_results],
        "overall_score": evaluation.overall_score,
        "overall_tier": str(evaluation.overall_tier),
        "summary_tokens": list(evaluation.summary_tokens),
        "recommendation_tokens": list(evaluation.recommendation_tokens),
    }


@dataclass(frozen=True)
class PersonPersonEvaluation:
    fingerprint_a: NameFingerprint
    fingerprint_b: NameFingerprint
    context: RelationshipContext
    orientations: tuple[Orientation, Orientation]
    method_results: tuple[ResonanceMethodResult, ...]
    overall_score: int
    overall_tier: QualityTier
    summary_tokens: tuple[str, ...]
    recommendation_tokens: tuple[str, ...]
    subject_kind: Literal[SubjectKind.PERSON_PERSON] = field(
        default=SubjectKind.PERSON_PERSON, init=False
    )

    def to_payload(self) -> dict[str, Any]:
        payload = _common_payload(self)
        payload.update(
            {
                "fingerprint_a": self.fingerprint_a.to_payload(),
                "fingerprint_b": self.fingerprint_b.to_payload(),
                "context": str(self.context),
                "orientations": [str(item) for item in self.orientations],
            }
        )
        return payload


@dataclass(frozen=True)
class PersonCatalogEntryEvaluation:
    fingerprint: NameFingerprint
    entry: CatalogEntry
    entry_fingerprint: NameFingerprint
    person_element: Element
    name_action: NameAction
    manifestation: Manifestation
    scriptural_pointer: ScripturalPointer
    method_results: tuple[ResonanceMethodResult, ...]
    overall_score: int
    overall_tier: QualityTier
    summary_tokens: tuple[str, ...]
    recommendation_tokens: tuple[str, ...]
    subject_kind: Literal[SubjectKind.PERSON_CATALOG_ENTRY] = field(
        default=SubjectKind.PERSON_CATALOG_ENTRY, init=False
    )

    def to_payload(self) -> dict[str, Any]:
        payload = _common_payload(self)
        payload.update(
            {
                "fingerprint": self.fingerprint.to_payload(),
                "entry": self.entry.to_payload(),
                "entry_fingerprint": self.entry_fingerprint.to_payload(),
                "person_element": str(self.person_element),
                "name_action": str(self.name_action),
                "manifestation": str(self.manifestation),
                "scriptural_pointer": self.scriptural_pointer.to_payload(),
            }
        )
        return payload


@dataclass(frozen=True)
class IntentionMatch:
    """Relevance of one catalog entry to an intention, with its components."""

    entry: CatalogEntry
    relevance_score: int
    components: Mapping[str, int]
    alignment: IntentionAlignment

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", MappingProxyType(dict(self.components)))

    def to_payload(self) -> dict[str, Any]:
        return {
            "entry_id": self.entry.id,
            "transliteration": self.entry.transliteration,
            "relevance_score": self.relevance_score,
            "components": dict(self.components),
            "alignment": str(self.alignment),
        }


@dataclass(frozen=True)
class CatalogEntryIntentionEvaluation:
    """Assessment of a single catalog entry against an intention.

    Intention matching does not run resonance methods, so ``method_results``
    is always empty and ``overall_score`` is the relevance score.
    """

    intention: IntentionTag
    match: IntentionMatch
    alternatives: tuple[CatalogEntry, ...]
    overall_score: int
    overall_tier: QualityTier
    summary_tokens: tuple[str, ...]
    recommendation_tokens: tuple[str, ...]
    method_results: tuple[ResonanceMethodResult, ...] = ()
    subject_kind: Literal[SubjectKind.CATALOG_ENTRY_INTENTION] = field(
        default=SubjectKind.CATALOG_ENTRY_INTENTION, init=False
    )

    @property
    def entry(self) -> CatalogEntry:
        return self.match.entry

    @property
    def alignment(self) -> IntentionAlignment:
        return self.match.alignment

    def to_payload(self) -> dict[str, Any]:
        payload = _common_payload(self)
        payload.update(
            {
                "intention": str(self.intention),
                "match": self.match.to_payload(),
                "alternatives": [entry.id for entry in self.alternatives],
            }
        )
        return payload


CompatibilityEvaluation = (
    PersonPersonEvaluation | PersonCatalogEntryEvaluation | CatalogEntryIntentionEvaluation
)

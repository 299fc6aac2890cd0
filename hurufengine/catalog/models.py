"""Catalog records for named reference entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..classification import Element, Planet
from ..fingerprint import NameFingerprint, fingerprint_from_total

__all__ = [
    "CatalogEntry",
    "CatalogKind",
    "IntentionTag",
    "ModeOfAction",
]


class CatalogKind(StrEnum):
    DIVINE_NAME = "divine_name"


class ModeOfAction(StrEnum):
    FAST = "fast"
    GRADUAL = "gradual"
    HIDDEN = "hidden"


class IntentionTag(StrEnum):
    CLARITY = "clarity"
    PATIENCE = "patience"
    PROVISION = "provision"
    HEALING = "healing"
    PROTECTION = "protection"
    GUIDANCE = "guidance"
    STRENGTH = "strength"
    PEACE = "peace"
    KNOWLEDGE = "knowledge"
    FORGIVENESS = "forgiveness"


@dataclass(frozen=True)
class CatalogEntry:
    """Named entity with its letter-value total and classification metadata.

    ``fingerprint_total`` is computed from ``canonical_text``, the normalized
    text with the definite-article prefix removed.
    """

    id: int
    kind: CatalogKind
    text: str
    canonical_text: str
    transliteration: str
    meaning: str
    fingerprint_total: int
    table_name: str
    element: Element
    planet: Planet
    mode_of_action: ModeOfAction
    function_tags: frozenset[IntentionTag]

    def fingerprint(self) -> NameFingerprint:
        return fingerprint_from_total(
            self.fingerprint_total, table_name=self.table_name, text=self.canonical_text
        )

    def to_payload(self) -> dict[str, object]:
        return {
            "id": self.id,
            "kind": str(self.kind),
            "text": self.text,
            "canonical_text": self.canonical_text,
            "transliteration": self.transliteration,
            "meaning": self.meaning,
            "fingerprint_total": self.fingerprint_total,
            "table_name": self.table_name,
            "element": str(self.element),
            "planet": str(self.planet),
            "mode_of_action": str(self.mode_of_action),
            "function_tags": sorted(str(tag) for tag in self.function_tags),
        }

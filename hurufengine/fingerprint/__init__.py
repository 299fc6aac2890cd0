"""Name fingerprints and the scriptural pointer derived from them."""

from __future__ import annotations

from .core import (
    ELEMENTAL_MODULUS,
    SPIRITUAL_MODULUS,
    ZODIACAL_MODULUS,
    NameFingerprint,
    compute_fingerprint,
    fingerprint_from_total,
)
from .scripture import (
    CHAPTER_COUNT,
    Chapter,
    ScripturalPointer,
    default_chapters,
    load_chapters,
    scriptural_pointer,
)

__all__ = [
    "CHAPTER_COUNT",
    "Chapter",
    "ELEMENTAL_MODULUS",
    "NameFingerprint",
    "SPIRITUAL_MODULUS",
    "ScripturalPointer",
    "ZODIACAL_MODULUS",
    "compute_fingerprint",
    "default_chapters",
    "fingerprint_from_total",
    "load_chapters",
    "scriptural_pointer",
]

"""Letter-value tables and name normalization."""

from __future__ import annotations

from .normalize import HONORIFIC_PREFIX, normalize_name, strip_honorific_prefix
from .tables import (
    ARABIC_LETTERS,
    LETTER_VARIANTS,
    MAGHRIBI,
    MASHRIQI,
    LetterValueTable,
    available_letter_tables,
    letter_table,
    table_from_settings,
)

__all__ = [
    "ARABIC_LETTERS",
    "HONORIFIC_PREFIX",
    "LETTER_VARIANTS",
    "LetterValueTable",
    "MAGHRIBI",
    "MASHRIQI",
    "available_letter_tables",
    "letter_table",
    "normalize_name",
    "strip_honorific_prefix",
    "table_from_settings",
]

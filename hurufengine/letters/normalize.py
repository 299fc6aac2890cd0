"""Name normalization ahead of letter-value summation."""

from __future__ import annotations

import unicodedata

__all__ = [
    "HAMZA_FORMS",
    "HONORIFIC_PREFIX",
    "is_stripped_mark",
    "normalize_name",
    "strip_honorific_prefix",
]

HONORIFIC_PREFIX = "ال"
TATWEEL = "ـ"
HAMZA_FORMS = frozenset("ءؤئ")

# Presentation-form lam-alef ligatures, isolated and final.
_LAM_ALEF_LIGATURES = str.maketrans(
    {
        "\uFEF5": "لآ",
        "\uFEF6": "لآ",
        "\uFEF7": "لأ",
        "\uFEF8": "لأ",
        "\uFEF9": "لإ",
        "\uFEFA": "لإ",
        "\uFEFB": "لا",
        "\uFEFC": "لا",
    }
)

_STRIPPED_RANGES: tuple[tuple[int, int], ...] = (
    (0x064B, 0x065F),  # harakat, tanwin, shadda, sukun and extended marks
    (0x0670, 0x0670),  # superscript alif
    (0x0610, 0x061A),  # honorific and small annotation signs
    (0x06D6, 0x06ED),  # Quranic pause and recitation marks
)


def is_stripped_mark(char: str) -> bool:
    """Return ``True`` when ``char`` is removed during normalization."""

    if char == TATWEEL:
        return True
    code = ord(char)
    return any(low <= code <= high for low, high in _STRIPPED_RANGES)


def normalize_name(raw: str) -> str:
    """Return ``raw`` without whitespace, diacritics or tatweel.

    The string is composed to NFC first so that alif with hamza or madda
    written as base plus combining mark collapses to a single letter, and
    lam-alef ligatures are spelled out as lam followed by alif. All other
    characters pass through untouched.
    """

    composed = unicodedata.normalize("NFC", raw).translate(_LAM_ALEF_LIGATURES)
    normalized = "".join(
        char for char in composed if not char.isspace() and not is_stripped_mark(char)
    )
    return normalized


def strip_honorific_prefix(text: str) -> str:
    """Drop a leading definite article from already normalized ``text``."""

    if text.startswith(HONORIFIC_PREFIX) and len(text) > len(HONORIFIC_PREFIX):
        return text[len(HONORIFIC_PREFIX):]
    return text

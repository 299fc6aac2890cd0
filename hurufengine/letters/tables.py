"""Named letter-value conventions for the Arabic abjad."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config.settings import Settings

__all__ = [
    "ARABIC_LETTERS",
    "LETTER_VARIANTS",
    "LetterValueTable",
    "MAGHRIBI",
    "MASHRIQI",
    "available_letter_tables",
    "letter_table",
    "table_from_settings",
]

# The 28 base letters in abjad (hawwaz) order.
ARABIC_LETTERS: tuple[str, ...] = (
    "ا", "ب", "ج", "د", "ه", "و", "ز", "ح", "ط", "ي",
    "ك", "ل", "م", "ن", "س", "ع", "ف", "ص", "ق", "ر",
    "ش", "ت", "ث", "خ", "ذ", "ض", "ظ", "غ",
)

# Orthographic variants counted with the value of their base letter.
LETTER_VARIANTS: Mapping[str, str] = MappingProxyType(
    {
        "أ": "ا",
        "إ": "ا",
        "آ": "ا",
        "ٱ": "ا",
        "ة": "ه",
        "ى": "ي",
    }
)

_MASHRIQI_VALUES = (
    1, 2, 3, 4, 5, 6, 7, 8, 9, 10,
    20, 30, 40, 50, 60, 70, 80, 90, 100, 200,
    300, 400, 500, 600, 700, 800, 900, 1000,
)

# Western ordering only reassigns six letters.
_MAGHRIBI_REASSIGNED = {
    "ص": 60,
    "ض": 90,
    "س": 300,
    "ش": 1000,
    "ظ": 800,
    "غ": 900,
}


@dataclass(frozen=True)
class LetterValueTable:
    """Immutable character to integer weight mapping.

    Characters absent from the table weigh zero. The ``name`` travels with
    every fingerprint built from the table so results stay auditable.
    """

    name: str
    values: Mapping[str, int] = field(repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("letter table name must be non-empty")
        cleaned: dict[str, int] = {}
        for char, weight in dict(self.values).items():
            if len(char) != 1:
                raise ValueError(f"letter table keys must be single characters: {char!r}")
            if int(weight) < 0:
                raise ValueError(f"letter weights must be non-negative: {char!r}={weight}")
            cleaned[char] = int(weight)
        object.__setattr__(self, "values", MappingProxyType(cleaned))

    def value_of(self, char: str) -> int:
        return self.values.get(char, 0)

    def total(self, text: Iterable[str]) -> int:
        return sum(self.values.get(char, 0) for char in text)

    def __contains__(self, char: object) -> bool:
        return char in self.values

    def to_payload(self) -> dict[str, object]:
        return {"name": self.name, "values": dict(self.values)}


def _build_table(name: str, overrides: Mapping[str, int] | None = None) -> LetterValueTable:
    values = dict(zip(ARABIC_LETTERS, _MASHRIQI_VALUES))
    if overrides:
        values.update(overrides)
    for variant, base in LETTER_VARIANTS.items():
        values[variant] = values[base]
    return LetterValueTable(name=name, values=values)


MASHRIQI = _build_table("mashriqi")
MAGHRIBI = _build_table("maghribi", _MAGHRIBI_REASSIGNED)

_REGISTRY: Mapping[str, LetterValueTable] = MappingProxyType(
    {MASHRIQI.name: MASHRIQI, MAGHRIBI.name: MAGHRIBI}
)


def available_letter_tables() -> tuple[str, ...]:
    """Return the names of the built-in letter conventions."""

    return tuple(sorted(_REGISTRY))


def letter_table(name: str) -> LetterValueTable:
    """Return the built-in table registered under ``name``."""

    key = name.strip().lower()
    try:
        return _REGISTRY[key]
    except KeyError as exc:
        options = ", ".join(available_letter_tables())
        raise ValueError(f"unknown letter table '{name}'. Expected one of: {options}") from exc


def table_from_settings(settings: "Settings") -> LetterValueTable:
    """Return the default letter table configured in ``settings.letters``."""

    return letter_table(settings.letters.table)

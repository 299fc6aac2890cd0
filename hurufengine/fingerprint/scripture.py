"""Two-stage scriptural pointer derived from a fingerprint total."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from ..arithmetic import wrap_mod
from ..errors import ConfigurationError, InvalidInputError

__all__ = [
    "CHAPTER_COUNT",
    "Chapter",
    "ScripturalPointer",
    "default_chapters",
    "load_chapters",
    "scriptural_pointer",
]

LOG = logging.getLogger(__name__)

CHAPTER_COUNT = 114


class _ChapterRecord(BaseModel):
    number: int = Field(ge=1)
    name: str = Field(min_length=1)
    arabic: str = Field(min_length=1)
    verses: int = Field(ge=1)


@dataclass(frozen=True)
class Chapter:
    number: int
    name: str
    arabic: str
    verses: int


@dataclass(frozen=True)
class ScripturalPointer:
    """Chapter selected by ``total mod 114`` and verse by ``total mod L``."""

    total: int
    chapter: Chapter
    verse: int

    def to_payload(self) -> dict[str, object]:
        return {
            "total": self.total,
            "chapter": self.chapter.number,
            "chapter_name": self.chapter.name,
            "chapter_arabic": self.chapter.arabic,
            "verse": self.verse,
            "verses_in_chapter": self.chapter.verses,
        }


def _read_yaml(path: Path | None) -> Any:
    try:
        if path is None:
            source = resources.files("hurufengine.datasets").joinpath("chapters.yaml")
            return yaml.safe_load(source.read_text(encoding="utf-8"))
        return yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"cannot read chapter table: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"chapter table is not valid YAML: {exc}") from exc


def load_chapters(path: Path | None = None) -> tuple[Chapter, ...]:
    """Load and validate the chapter table.

    The table must hold exactly 114 records numbered ``1..114`` in order,
    each with a positive verse count.
    """

    raw = _read_yaml(path)
    records = raw.get("chapters") if isinstance(raw, dict) else None
    if not isinstance(records, list):
        raise ConfigurationError("chapter table must define a 'chapters' list")
    try:
        parsed = [_ChapterRecord.model_validate(record) for record in records]
    except ValidationError as exc:
        raise ConfigurationError(
            "chapter table failed validation", errors=exc.errors()
        ) from exc
    if len(parsed) != CHAPTER_COUNT:
        raise ConfigurationError(
            f"chapter table must hold {CHAPTER_COUNT} records, found {len(parsed)}"
        )
    for expected, record in enumerate(parsed, start=1):
        if record.number != expected:
            raise ConfigurationError(
                f"chapter records out of order: expected {expected}, found {record.number}"
            )
    chapters = tuple(Chapter(**record.model_dump()) for record in parsed)
    LOG.debug("loaded %d chapters (%d verses)", len(chapters), sum(c.verses for c in chapters))
    return chapters


@lru_cache(maxsize=1)
def default_chapters() -> tuple[Chapter, ...]:
    return load_chapters()


def scriptural_pointer(
    total: int, chapters: Sequence[Chapter] | None = None
) -> ScripturalPointer:
    """Reduce ``total`` into a chapter, then into a verse of that chapter."""

    if total <= 0:
        raise InvalidInputError(f"scriptural pointer needs a positive total, got {total}")
    table = default_chapters() if chapters is None else chapters
    if len(table) != CHAPTER_COUNT:
        raise ConfigurationError(
            f"chapter table must hold {CHAPTER_COUNT} records, found {len(table)}"
        )
    chapter = table[wrap_mod(total, CHAPTER_COUNT) - 1]
    return ScripturalPointer(total=total, chapter=chapter, verse=wrap_mod(total, chapter.verses))

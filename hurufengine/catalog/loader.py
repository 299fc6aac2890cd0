"""Load and validate the named-entity catalog."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from ..classification import Element, Planet
from ..config.settings import Settings
from ..errors import ConfigurationError, UnknownEntityError
from ..fingerprint import Chapter, default_chapters
from ..letters import LetterValueTable, letter_table, normalize_name, strip_honorific_prefix
from .models import CatalogEntry, CatalogKind, IntentionTag, ModeOfAction

__all__ = [
    "Catalog",
    "DEFAULT_CATALOG_TABLE",
    "catalog_from_settings",
    "default_catalog",
    "load_bundled_datasets",
    "load_catalog",
]

LOG = logging.getLogger(__name__)

DEFAULT_CATALOG_TABLE = "mashriqi"


class _EntryRecord(BaseModel):
    id: int = Field(ge=1)
    text: str = Field(min_length=1)
    transliteration: str = ""
    meaning: str = ""


class _MetadataRecord(BaseModel):
    element: Element
    planet: Planet
    mode: ModeOfAction
    functions: list[IntentionTag] = Field(min_length=1)


class Catalog:
    """Immutable, id-indexed collection of :class:`CatalogEntry` records."""

    def __init__(self, entries: Iterable[CatalogEntry]):
        by_id: dict[int, CatalogEntry] = {}
        for entry in entries:
            if entry.id in by_id:
                raise ConfigurationError(f"duplicate catalog entry id {entry.id}")
            by_id[entry.id] = entry
        if not by_id:
            raise ConfigurationError("catalog must contain at least one entry")
        self._entries = tuple(by_id[key] for key in sorted(by_id))
        self._by_id: Mapping[int, CatalogEntry] = MappingProxyType(by_id)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._by_id

    def get(self, entry_id: int) -> CatalogEntry:
        try:
            return self._by_id[entry_id]
        except KeyError:
            raise UnknownEntityError(entry_id) from None

    def by_intention(self, intention: IntentionTag | str) -> tuple[CatalogEntry, ...]:
        tag = IntentionTag(intention)
        return tuple(entry for entry in self._entries if tag in entry.function_tags)


def _read_document(path: Path | None) -> Any:
    try:
        if path is None:
            source = resources.files("hurufengine.datasets").joinpath("divine_names.yaml")
            return yaml.safe_load(source.read_text(encoding="utf-8"))
        return yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"cannot read catalog: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"catalog is not valid YAML: {exc}") from exc


def _build_entry(
    kind: CatalogKind,
    record: _EntryRecord,
    metadata: _MetadataRecord,
    table: LetterValueTable,
) -> CatalogEntry:
    canonical = strip_honorific_prefix(normalize_name(record.text))
    total = table.total(canonical)
    if total <= 0:
        raise ConfigurationError(
            f"catalog entry {record.id} has no value in the '{table.name}' table"
        )
    return CatalogEntry(
        id=record.id,
        kind=kind,
        text=record.text,
        canonical_text=canonical,
        transliteration=record.transliteration,
        meaning=record.meaning,
        fingerprint_total=total,
        table_name=table.name,
        element=metadata.element,
        planet=metadata.planet,
        mode_of_action=metadata.mode,
        function_tags=frozenset(metadata.functions),
    )


def load_catalog(
    path: Path | None = None, *, table: LetterValueTable | None = None
) -> Catalog:
    """Load a catalog document and validate it completely.

    Every entry must have a metadata record; a missing or malformed record
    raises :class:`ConfigurationError` here rather than on first lookup.
    """

    active_table = table or letter_table(DEFAULT_CATALOG_TABLE)
    raw = _read_document(path)
    if not isinstance(raw, dict):
        raise ConfigurationError("catalog document must be a mapping")
    try:
        kind = CatalogKind(raw.get("kind", CatalogKind.DIVINE_NAME))
    except ValueError as exc:
        raise ConfigurationError(f"unsupported catalog kind {raw.get('kind')!r}") from exc

    entries_raw = raw.get("entries")
    metadata_raw = raw.get("metadata")
    if not isinstance(entries_raw, list) or not isinstance(metadata_raw, dict):
        raise ConfigurationError("catalog must define an 'entries' list and a 'metadata' mapping")

    bad_keys = [key for key in metadata_raw if not isinstance(key, int)]
    if bad_keys:
        raise ConfigurationError(f"catalog metadata keys must be entry ids: {bad_keys}")
    try:
        records = [_EntryRecord.model_validate(item) for item in entries_raw]
        metadata = {
            key: _MetadataRecord.model_validate(value)
            for key, value in metadata_raw.items()
        }
    except ValidationError as exc:
        raise ConfigurationError("catalog failed validation", errors=exc.errors()) from exc

    missing = [record.id for record in records if record.id not in metadata]
    if missing:
        raise ConfigurationError(
            f"catalog entries missing metadata: {missing}",
            errors=[{"id": entry_id, "msg": "missing metadata"} for entry_id in missing],
        )
    orphaned = sorted(set(metadata) - {record.id for record in records})
    if orphaned:
        LOG.warning("ignoring metadata without catalog entries: %s", orphaned)

    catalog = Catalog(
        _build_entry(kind, record, metadata[record.id], active_table) for record in records
    )
    LOG.debug("loaded %d %s entries using '%s'", len(catalog), kind, active_table.name)
    return catalog


def catalog_from_settings(settings: Settings) -> Catalog:
    """Load the catalog named by ``settings.catalog``."""

    cfg = settings.catalog
    return load_catalog(cfg.path, table=letter_table(cfg.letter_table))


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """Return the bundled Divine Names catalog, loaded once per process."""

    return load_catalog()


def load_bundled_datasets() -> tuple[Catalog, tuple[Chapter, ...]]:
    """Load and validate every bundled dataset.

    Both loaders are cached, so services call this once at startup to surface
    a broken data file as :class:`ConfigurationError` before the first request
    rather than during it.
    """

    catalog = default_catalog()
    chapters = default_chapters()
    LOG.info(
        "bundled datasets ready: %d catalog entries, %d chapters", len(catalog), len(chapters)
    )
    return catalog, chapters

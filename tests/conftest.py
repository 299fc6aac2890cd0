from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from hurufengine.catalog import (
    Catalog,
    CatalogEntry,
    CatalogKind,
    IntentionTag,
    ModeOfAction,
    default_catalog,
)
from hurufengine.classification import Element, Planet
from hurufengine.letters import MAGHRIBI, MASHRIQI, LetterValueTable


@pytest.fixture(autouse=True)
def _isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep tests away from any real ``~/.hurufengine`` directory."""

    home = tmp_path / "hurufengine-home"
    monkeypatch.setenv("HURUFENGINE_HOME", str(home))
    return home


@pytest.fixture()
def mashriqi() -> LetterValueTable:
    return MASHRIQI


@pytest.fixture()
def maghribi() -> LetterValueTable:
    return MAGHRIBI


@pytest.fixture(scope="session")
def divine_names() -> Catalog:
    return default_catalog()


@pytest.fixture()
def make_entry() -> Callable[..., CatalogEntry]:
    def _make(
        entry_id: int,
        tags: Iterable[str],
        mode: str = "fast",
        *,
        total: int = 100,
        element: str = "fire",
        planet: str = "sun",
    ) -> CatalogEntry:
        return CatalogEntry(
            id=entry_id,
            kind=CatalogKind.DIVINE_NAME,
            text=f"entry-{entry_id}",
            canonical_text=f"entry-{entry_id}",
            transliteration=f"Entry {entry_id}",
            meaning="",
            fingerprint_total=total,
            table_name="mashriqi",
            element=Element(element),
            planet=Planet(planet),
            mode_of_action=ModeOfAction(mode),
            function_tags=frozenset(IntentionTag(tag) for tag in tags),
        )

    return _make


@pytest.fixture()
def small_catalog(make_entry: Callable[..., CatalogEntry]) -> Catalog:
    return Catalog(
        [
            make_entry(1, ["healing"], "hidden"),
            make_entry(2, ["peace", "patience"], "fast"),
            make_entry(3, ["strength"], "fast"),
            make_entry(4, ["healing", "peace"], "fast"),
            make_entry(5, ["healing"], "hidden"),
        ]
    )

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from hurufengine.arithmetic import wrap_mod
from hurufengine.errors import ConfigurationError, InvalidInputError
from hurufengine.fingerprint import (
    compute_fingerprint,
    default_chapters,
    fingerprint_from_total,
    load_chapters,
    scriptural_pointer,
)
from hurufengine.letters import MAGHRIBI, MASHRIQI, LetterValueTable


def test_worked_example(mashriqi: LetterValueTable) -> None:
    fp = compute_fingerprint("محمد", mashriqi)
    assert fp.normalized_text == "محمد"
    assert fp.total == 92
    assert fp.spiritual_remainder == 2
    assert fp.elemental_remainder == 4
    assert fp.zodiacal_remainder == 8
    assert fp.table_name == "mashriqi"


def test_table_convention_is_recorded_and_changes_total() -> None:
    eastern = compute_fingerprint("شمس", MASHRIQI)
    western = compute_fingerprint("شمس", MAGHRIBI)
    assert eastern.total == 400
    assert western.total == 1340
    assert (eastern.table_name, western.table_name) == ("mashriqi", "maghribi")


def test_diacritics_do_not_change_fingerprint(mashriqi: LetterValueTable) -> None:
    assert compute_fingerprint("مُحَمَّد", mashriqi) == compute_fingerprint("محمد", mashriqi)


def test_variants_use_base_values(mashriqi: LetterValueTable) -> None:
    assert compute_fingerprint("أحمد", mashriqi).total == 53
    assert compute_fingerprint("فاطمة", mashriqi).total == 80 + 1 + 9 + 40 + 5


def test_lam_alef_ligature_counts_both_letters(mashriqi: LetterValueTable) -> None:
    spelled = compute_fingerprint("علاء", mashriqi)
    ligature = compute_fingerprint("ع\uFEFCء", mashriqi)
    assert ligature.total == spelled.total == 101
    assert ligature == spelled


@pytest.mark.parametrize("name", ["", "   ", "َّ", "xyz123"])
def test_degenerate_names_raise(name: str, mashriqi: LetterValueTable) -> None:
    with pytest.raises(InvalidInputError):
        compute_fingerprint(name, mashriqi)


def test_invalid_input_is_a_value_error(mashriqi: LetterValueTable) -> None:
    with pytest.raises(ValueError):
        compute_fingerprint("", mashriqi)


def test_hamza_forms_log_a_warning(
    mashriqi: LetterValueTable, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="hurufengine.fingerprint.core"):
        fp = compute_fingerprint("سماء", mashriqi)
    assert fp.total == 101
    assert "hamza" in caplog.text


def test_fingerprint_from_total_wraps_zero_remainders() -> None:
    fp = fingerprint_from_total(36, table_name="mashriqi")
    assert (fp.spiritual_remainder, fp.elemental_remainder, fp.zodiacal_remainder) == (9, 4, 12)
    with pytest.raises(InvalidInputError):
        fingerprint_from_total(0, table_name="mashriqi")


def test_fingerprint_payload(mashriqi: LetterValueTable) -> None:
    payload = compute_fingerprint("علي", mashriqi).to_payload()
    assert payload == {
        "normalized_text": "علي",
        "total": 110,
        "spiritual_remainder": 2,
        "elemental_remainder": 2,
        "zodiacal_remainder": 2,
        "table_name": "mashriqi",
    }


def test_wrap_mod() -> None:
    assert wrap_mod(18, 9) == 9
    assert wrap_mod(19, 9) == 1
    with pytest.raises(ValueError):
        wrap_mod(5, 0)


def test_bundled_chapter_table() -> None:
    chapters = default_chapters()
    assert len(chapters) == 114
    assert sum(chapter.verses for chapter in chapters) == 6236
    assert chapters[0].name == "Al-Fatihah"


@pytest.mark.parametrize(
    ("total", "chapter", "verse"),
    [
        (1, 1, 1),
        (92, 92, 8),
        (114, 114, 6),
        (115, 1, 3),
        (228, 114, 6),
    ],
)
def test_scriptural_pointer_double_wrap(total: int, chapter: int, verse: int) -> None:
    pointer = scriptural_pointer(total)
    assert pointer.chapter.number == chapter
    assert pointer.verse == verse
    assert 1 <= pointer.verse <= pointer.chapter.verses


def test_scriptural_pointer_rejects_non_positive_total() -> None:
    with pytest.raises(InvalidInputError):
        scriptural_pointer(0)


def test_scriptural_pointer_rejects_short_table() -> None:
    with pytest.raises(ConfigurationError):
        scriptural_pointer(10, default_chapters()[:10])


def test_load_chapters_validates_count(tmp_path: Path) -> None:
    path = tmp_path / "chapters.yaml"
    path.write_text(
        "chapters:\n  - {number: 1, name: A, arabic: ا, verses: 7}\n", encoding="utf-8"
    )
    with pytest.raises(ConfigurationError):
        load_chapters(path)


def test_load_chapters_validates_records(tmp_path: Path) -> None:
    path = tmp_path / "chapters.yaml"
    path.write_text(
        "chapters:\n  - {number: 1, name: A, arabic: ا, verses: 0}\n", encoding="utf-8"
    )
    with pytest.raises(ConfigurationError) as excinfo:
        load_chapters(path)
    assert excinfo.value.errors


def test_load_chapters_rejects_bad_yaml(tmp_path: Path) -> None:
    path = tmp_path / "chapters.yaml"
    path.write_text("chapters: [\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_chapters(path)


def test_load_chapters_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        load_chapters(tmp_path / "missing.yaml")
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)

from __future__ import annotations

import pytest

from hurufengine.letters import (
    ARABIC_LETTERS,
    LETTER_VARIANTS,
    MAGHRIBI,
    MASHRIQI,
    LetterValueTable,
    available_letter_tables,
    letter_table,
    normalize_name,
    strip_honorific_prefix,
)


def test_tables_cover_every_letter_and_variant() -> None:
    for table in (MASHRIQI, MAGHRIBI):
        assert all(table.value_of(letter) > 0 for letter in ARABIC_LETTERS)
        for variant, base in LETTER_VARIANTS.items():
            assert table.value_of(variant) == table.value_of(base)


def test_conventions_differ_only_on_six_letters() -> None:
    differing = {
        letter
        for letter in ARABIC_LETTERS
        if MASHRIQI.value_of(letter) != MAGHRIBI.value_of(letter)
    }
    assert differing == set("صضسشظغ")
    assert MASHRIQI.value_of("س") == 60
    assert MAGHRIBI.value_of("س") == 300
    assert MAGHRIBI.value_of("ش") == 1000
    assert MASHRIQI.value_of("غ") == 1000


def test_unknown_characters_weigh_zero() -> None:
    assert MASHRIQI.value_of("x") == 0
    assert MASHRIQI.total("xمy") == 40


def test_registry_lookup_is_case_insensitive() -> None:
    assert available_letter_tables() == ("maghribi", "mashriqi")
    assert letter_table(" Maghribi ") is MAGHRIBI
    with pytest.raises(ValueError):
        letter_table("pythagorean")


def test_custom_table_validation() -> None:
    table = LetterValueTable(name="custom", values={"a": 1, "b": 2})
    assert table.total("abc") == 3
    assert "a" in table
    with pytest.raises(ValueError):
        LetterValueTable(name="bad", values={"a": -1})
    with pytest.raises(ValueError):
        LetterValueTable(name="bad", values={"ab": 1})
    with pytest.raises(ValueError):
        LetterValueTable(name="", values={"a": 1})


def test_custom_table_is_read_only() -> None:
    table = LetterValueTable(name="custom", values={"a": 1})
    with pytest.raises(TypeError):
        table.values["b"] = 2  # type: ignore[index]


def test_normalize_strips_whitespace_diacritics_and_tatweel() -> None:
    assert normalize_name(" مُحَمَّد ") == "محمد"
    assert normalize_name("مـحـمد") == "محمد"
    assert normalize_name("عبد الله") == "عبدالله"
    assert normalize_name("رحمٰن") == "رحمن"


def test_normalize_composes_alif_with_hamza() -> None:
    decomposed = "أحمد"
    assert normalize_name(decomposed) == "أحمد"


def test_normalize_passes_other_characters_through() -> None:
    assert normalize_name("Ali محمد") == "Aliمحمد"


@pytest.mark.parametrize(
    ("ligature", "expanded"),
    [
        ("\uFEF5", "لآ"),
        ("\uFEF8", "لأ"),
        ("\uFEF9", "لإ"),
        ("\uFEFC", "لا"),
    ],
)
def test_normalize_expands_lam_alef_ligatures(ligature: str, expanded: str) -> None:
    assert normalize_name(ligature) == expanded
    assert normalize_name("ع\uFEFCء") == "علاء"


def test_strip_honorific_prefix() -> None:
    assert strip_honorific_prefix("الرحمن") == "رحمن"
    assert strip_honorific_prefix("رحمن") == "رحمن"
    assert strip_honorific_prefix("ال") == "ال"

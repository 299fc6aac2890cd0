from __future__ import annotations

import pytest

from hurufengine.classification import Element, ElementalRelation, PlanetaryFriendliness
from hurufengine.fingerprint import compute_fingerprint, fingerprint_from_total
from hurufengine.letters import LetterValueTable
from hurufengine.resonance import (
    SOUL_ARCHETYPES,
    MethodId,
    QualityTier,
    Severity,
    daily_interaction,
    dominant_element,
    element_histogram,
    elemental_temperament,
    histogram_overlap,
    load_scoring_policy,
    planetary_cosmic,
    soul_number,
    spiritual_destiny,
)


def test_soul_number_examples() -> None:
    assert soul_number(2, 5) == 5
    assert soul_number(1, 1) == 9
    assert soul_number(9, 9) == 7
    assert soul_number(5, 2) == soul_number(2, 5)


@pytest.mark.parametrize(("first", "second"), [(0, 1), (1, 10), (-3, 4)])
def test_soul_number_rejects_out_of_range(first: int, second: int) -> None:
    with pytest.raises(ValueError):
        soul_number(first, second)


def test_archetype_severities() -> None:
    favorable = {n for n, item in SOUL_ARCHETYPES.items() if item.severity is Severity.FAVORABLE}
    unfavorable = {
        n for n, item in SOUL_ARCHETYPES.items() if item.severity is Severity.UNFAVORABLE
    }
    assert favorable == {2, 5, 7, 8}
    assert unfavorable == {3, 4, 6, 9}
    assert SOUL_ARCHETYPES[1].severity is Severity.CAUTIONARY


def test_spiritual_destiny_self_comparison() -> None:
    fp = fingerprint_from_total(92, table_name="mashriqi")
    result = spiritual_destiny(fp, fp)
    assert result.method_id is MethodId.SPIRITUAL_DESTINY
    assert result.raw_inputs["soul_number"] == 2
    assert result.score == 85
    assert result.quality_tier is QualityTier.EXCELLENT
    assert result.explanation_tokens[0] == "compatibility.soul.archetypes.2.title"


def test_spiritual_destiny_severity_bands() -> None:
    cautionary = spiritual_destiny(
        fingerprint_from_total(1, table_name="t"), fingerprint_from_total(2, table_name="t")
    )
    unfavorable = spiritual_destiny(
        fingerprint_from_total(1, table_name="t"), fingerprint_from_total(4, table_name="t")
    )
    assert cautionary.raw_inputs["soul_number"] == 1
    assert cautionary.score == 60
    assert unfavorable.raw_inputs["soul_number"] == 3
    assert unfavorable.score == 35


def test_elemental_temperament_fire_air_is_supportive() -> None:
    fire = fingerprint_from_total(29, table_name="t")
    air = fingerprint_from_total(23, table_name="t")
    result = elemental_temperament(fire, air)
    assert result.raw_inputs["elements"] == (Element.FIRE, Element.AIR)
    assert result.raw_inputs["relation"] is ElementalRelation.SUPPORTIVE
    assert result.score == 80
    assert "resonance.elemental.relation.supportive" in result.explanation_tokens


def test_planetary_cosmic_opposing() -> None:
    leo = fingerprint_from_total(29, table_name="t")
    aquarius = fingerprint_from_total(23, table_name="t")
    result = planetary_cosmic(leo, aquarius)
    assert result.raw_inputs["signs"] == ("leo", "aquarius")
    assert result.raw_inputs["friendliness"] is PlanetaryFriendliness.OPPOSING
    assert result.score == 35
    assert result.quality_tier is QualityTier.CHALLENGING


def test_histogram_and_dominant_tie_break() -> None:
    histogram = element_histogram("محمد")
    assert histogram[Element.FIRE] == 2
    assert histogram[Element.EARTH] == 2
    assert dominant_element(histogram) is Element.FIRE
    assert dominant_element(element_histogram("")) is Element.FIRE
    assert dominant_element(element_histogram("بج")) is Element.AIR


def test_dominant_element_uses_seven_letter_groups() -> None:
    sun = element_histogram("شمس")
    assert sun[Element.FIRE] == 2
    assert sun[Element.WATER] == 1
    assert dominant_element(sun) is Element.FIRE
    assert dominant_element(element_histogram("صبر")) is Element.EARTH


def test_histogram_skips_unclassified_characters() -> None:
    assert sum(element_histogram("abcم").values()) == 1


def test_histogram_overlap_bounds() -> None:
    same = element_histogram("محمد")
    assert histogram_overlap(same, same) == pytest.approx(1.0)
    assert histogram_overlap(element_histogram("ا"), element_histogram("ب")) == 0.0
    assert histogram_overlap(element_histogram(""), same) == 0.0


def test_daily_interaction_scores(mashriqi: LetterValueTable) -> None:
    muhammad = compute_fingerprint("محمد", mashriqi)
    ali = compute_fingerprint("علي", mashriqi)

    identical = daily_interaction(muhammad, muhammad)
    assert identical.score == 100

    mixed = daily_interaction(muhammad, ali)
    assert mixed.raw_inputs["dominants"] == (Element.FIRE, Element.EARTH)
    assert mixed.raw_inputs["relation"] is ElementalRelation.NEUTRAL
    assert mixed.raw_inputs["overlap"] == pytest.approx(0.5)
    assert mixed.score == 60


def test_daily_interaction_without_classifiable_letters() -> None:
    blank = fingerprint_from_total(10, table_name="t")
    result = daily_interaction(blank, blank)
    assert result.raw_inputs["overlap"] == 0.0
    assert result.score == 80


def test_methods_follow_policy_overrides() -> None:
    policy = load_scoring_policy(overrides={"relation_scores": {"supportive": 70}})
    fire = fingerprint_from_total(29, table_name="t")
    air = fingerprint_from_total(23, table_name="t")
    assert elemental_temperament(fire, air, policy=policy).score == 70


def test_method_result_payload_is_plain() -> None:
    fp = fingerprint_from_total(29, table_name="t")
    payload = planetary_cosmic(fp, fp).to_payload()
    assert payload["method_id"] == "planetary_cosmic"
    assert payload["quality_tier"] == "excellent"
    assert payload["raw_inputs"]["friendliness"] == "friendly"

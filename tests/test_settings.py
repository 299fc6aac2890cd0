from __future__ import annotations

from pathlib import Path

import pytest

from hurufengine.config import (
    CURRENT_SETTINGS_SCHEMA_VERSION,
    Settings,
    config_path,
    get_config_home,
    load_settings,
)
from hurufengine.errors import ConfigurationError
from hurufengine.letters import MAGHRIBI, MASHRIQI, table_from_settings
from hurufengine.resonance import default_scoring_policy, load_scoring_policy


def test_defaults_when_file_missing(tmp_path: Path) -> None:
    settings = load_settings(tmp_path / "absent.yaml")
    assert settings == Settings()
    assert settings.letters.table == "maghribi"
    assert settings.catalog.letter_table == "mashriqi"
    assert not (tmp_path / "absent.yaml").exists()


def test_config_home_from_environment(_isolated_config_home: Path) -> None:
    assert get_config_home() == _isolated_config_home
    assert config_path() == _isolated_config_home / "config.yaml"


def test_load_from_config_home(_isolated_config_home: Path) -> None:
    _isolated_config_home.mkdir(parents=True)
    (_isolated_config_home / "config.yaml").write_text(
        "letters:\n  table: Mashriqi\nscoring:\n  tension_threshold: 15\n", encoding="utf-8"
    )
    settings = load_settings()
    assert settings.letters.table == "mashriqi"
    assert settings.scoring.tension_threshold == 15
    assert settings.schema_version == CURRENT_SETTINGS_SCHEMA_VERSION
    assert table_from_settings(settings) is MASHRIQI
    assert table_from_settings(Settings()) is MAGHRIBI


@pytest.mark.parametrize(
    "payload",
    [
        "scoring:\n  tier_thresholds: {excellent: 60, very_good: 75, good: 65, moderate: 50}\n",
        "scoring:\n  tier_thresholds: {excellent: 85, good: 65, moderate: 50}\n",
        "scoring:\n  method_weights: {spiritual_destiny: -1}\n",
        "scoring:\n  method_weights: {numerology: 1}\n",
        "scoring:\n  relation_scores: {harmonious: 120, supportive: 80, neutral: 60, challenging: 35}\n",
        "scoring:\n  severity_scores: {favorable: 30, cautionary: 60, unfavorable: 35}\n",
        "schema_version: 99\n",
        "- not\n- a mapping\n",
        "letters: [\n",
    ],
)
def test_invalid_settings_raise(tmp_path: Path, payload: str) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(payload, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_settings(path)


def test_validation_errors_are_attached(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("scoring:\n  overlap_span: -4\n", encoding="utf-8")
    with pytest.raises(ConfigurationError) as excinfo:
        load_settings(path)
    assert excinfo.value.errors


def test_policy_overrides_merge_recursively() -> None:
    policy = load_scoring_policy(overrides={"relation_scores": {"neutral": 55}})
    assert policy.relation_scores["neutral"] == 55
    assert policy.relation_scores["harmonious"] == 90
    assert default_scoring_policy().relation_scores["neutral"] == 60


def test_policy_from_settings(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("scoring:\n  tension_threshold: 10\n", encoding="utf-8")
    policy = load_scoring_policy(settings=load_settings(path))
    assert policy.tension_threshold == 10
    assert policy.to_mapping()["tier_thresholds"]["excellent"] == 85


def test_all_zero_weights_rejected() -> None:
    zero = {
        "spiritual_destiny": 0,
        "elemental_temperament": 0,
        "planetary_cosmic": 0,
        "daily_interaction": 0,
    }
    with pytest.raises(ConfigurationError):
        load_scoring_policy(overrides={"method_weights": zero})


def test_policy_is_immutable() -> None:
    policy = default_scoring_policy()
    with pytest.raises(TypeError):
        policy.relation_scores["neutral"] = 0  # type: ignore[index]

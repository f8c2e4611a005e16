import dataclasses

import pytest

from score_adjuster.config import DEFAULT_CONFIG, NormalizerConfig, create_config
from score_adjuster.exceptions import ConfigurationError


def test_defaults():
    assert DEFAULT_CONFIG.min_scoring_users == 17500
    assert DEFAULT_CONFIG.min_cohort_size == 10
    assert DEFAULT_CONFIG.baseline_period == "2010-2010"
    assert DEFAULT_CONFIG.allow_score_increases is False
    assert DEFAULT_CONFIG.allow_degenerate_baseline is False


def test_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.allow_score_increases = True


def test_create_config():
    config = create_config(2005, 2009, min_scoring_users=5000, allow_score_increases=True)
    assert config.baseline_period == "2005-2009"
    assert config.min_scoring_users == 5000
    assert config.allow_score_increases
    assert config.in_baseline(2005) and config.in_baseline(2009)
    assert not config.in_baseline(2010)
    assert not config.in_baseline(None)


@pytest.mark.parametrize("overrides", [
    {"baseline_start_year": 2012, "baseline_end_year": 2010},
    {"min_scoring_users": -1},
    {"min_cohort_size": 0},
])
def test_invalid_config_raises(overrides):
    with pytest.raises(ConfigurationError):
        NormalizerConfig(**overrides)


def test_from_env():
    environ = {
        "SCORE_ADJUSTER_MIN_SCORING_USERS": "25_000",
        "SCORE_ADJUSTER_MIN_COHORT_SIZE": "15",
        "SCORE_ADJUSTER_BASELINE_START_YEAR": "2006",
        "SCORE_ADJUSTER_BASELINE_END_YEAR": "2008",
        "SCORE_ADJUSTER_ALLOW_SCORE_INCREASES": "yes",
    }
    config = NormalizerConfig.from_env(environ)

    assert config.min_scoring_users == 25000
    assert config.min_cohort_size == 15
    assert config.baseline_period == "2006-2008"
    assert config.allow_score_increases is True
    assert config.allow_degenerate_baseline is False


def test_from_env_keeps_defaults_for_unset_values():
    assert NormalizerConfig.from_env({}) == DEFAULT_CONFIG


@pytest.mark.parametrize("key, value", [
    ("SCORE_ADJUSTER_MIN_COHORT_SIZE", "ten"),
    ("SCORE_ADJUSTER_ALLOW_SCORE_INCREASES", "maybe"),
])
def test_from_env_rejects_bad_values(key, value):
    with pytest.raises(ConfigurationError):
        NormalizerConfig.from_env({key: value})

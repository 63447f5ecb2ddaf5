"""
Testing settings: defaults, env overrides, and bad values.
"""

import pytest

from mastermind.config import (
    DEFAULT_DIGIT_COUNT,
    DEFAULT_DIGIT_MAX_VALUE,
    DEFAULT_MAX_GUESSES,
    SessionConfig,
    build_session_config,
    load_config,
)
from mastermind.errors import InvalidConfiguration


def test_defaults_without_env():
    app_config = load_config()

    assert app_config.session.digit_count == DEFAULT_DIGIT_COUNT == 4
    assert app_config.session.digit_max_value == DEFAULT_DIGIT_MAX_VALUE == 6
    assert app_config.session.max_guesses == DEFAULT_MAX_GUESSES == 10
    assert app_config.session.seed is None
    assert app_config.seed_source == "local"
    assert app_config.log_level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MASTERMIND_DIGIT_COUNT", "5")
    monkeypatch.setenv("MASTERMIND_DIGIT_MAX_VALUE", "8")
    monkeypatch.setenv("MASTERMIND_MAX_GUESSES", "12")
    monkeypatch.setenv("MASTERMIND_SEED", "42")
    monkeypatch.setenv("MASTERMIND_SEED_SOURCE", "Random_Org")
    monkeypatch.setenv("MASTERMIND_LOG_LEVEL", "debug")

    app_config = load_config()

    assert app_config.session == SessionConfig(digit_count=5, digit_max_value=8, max_guesses=12, seed=42)
    assert app_config.seed_source == "random_org"
    assert app_config.log_level == "DEBUG"


def test_blank_seed_means_no_seed(monkeypatch):
    monkeypatch.setenv("MASTERMIND_SEED", "  ")
    assert load_config().session.seed is None


@pytest.mark.parametrize("name,value", [
    ("MASTERMIND_DIGIT_COUNT", "0"),
    ("MASTERMIND_MAX_GUESSES", "many"),
    ("MASTERMIND_SEED_SOURCE", "dice"),
    ("MASTERMIND_LOG_LEVEL", "LOUD"),
])
def test_bad_env_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(InvalidConfiguration):
        load_config()


def test_build_session_config_reports_field():
    with pytest.raises(InvalidConfiguration) as excinfo:
        build_session_config(digit_count=4, digit_max_value=0, max_guesses=10)
    assert "digit_max_value" in str(excinfo.value)


def test_session_config_is_frozen():
    config = SessionConfig()
    with pytest.raises(Exception):
        config.digit_count = 9


def test_with_overrides_runs_the_same_validators():
    app_config = load_config()

    assert app_config.with_overrides(log_level=" info ").log_level == "INFO"
    with pytest.raises(InvalidConfiguration):
        app_config.with_overrides(log_level="chatty")
    with pytest.raises(InvalidConfiguration):
        app_config.with_overrides(seed_source="dice")


def test_env_strings_are_parsed_but_direct_values_are_strict(monkeypatch):
    monkeypatch.setenv("MASTERMIND_DIGIT_COUNT", " 3 ")
    assert load_config().session.digit_count == 3

    with pytest.raises(InvalidConfiguration):
        build_session_config(digit_count="3")
    with pytest.raises(InvalidConfiguration):
        build_session_config(digit_count=True)

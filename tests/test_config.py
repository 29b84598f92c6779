"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from connect4.core.config import AISettings, Settings, get_settings, reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


def test_defaults(monkeypatch):
    for key in ("AI_DIFFICULTY", "AI_MEDIUM_DEPTH", "AI_HARD_DEPTH", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)

    settings = Settings(_env_file=None)

    assert settings.ai.difficulty == "medium"
    assert settings.ai.medium_depth == 3
    assert settings.ai.hard_depth == 5
    assert settings.log.level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("AI_HARD_DEPTH", "6")
    monkeypatch.setenv("AI_DIFFICULTY", "hard")

    settings = get_settings()

    assert settings.ai.hard_depth == 6
    assert settings.ai.difficulty == "hard"


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_depth_out_of_range(monkeypatch):
    monkeypatch.setenv("AI_MEDIUM_DEPTH", "20")

    with pytest.raises(ValidationError):
        AISettings()


def test_unknown_difficulty(monkeypatch):
    monkeypatch.setenv("AI_DIFFICULTY", "expert")

    with pytest.raises(ValidationError):
        AISettings()

import pytest
from pydantic import ValidationError

from droll.config import Settings, load_settings
from droll.rules.types import DEFAULT_MAX_DICE


def test_defaults(monkeypatch):
    monkeypatch.delenv("DROLL_MAX_DICE", raising=False)
    monkeypatch.delenv("DROLL_LOGGING_LEVEL", raising=False)
    s = load_settings()
    assert s.max_dice == DEFAULT_MAX_DICE == 255
    assert s.logging_level == "WARNING"
    assert s.logging_console is None


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DROLL_MAX_DICE", "12")
    monkeypatch.setenv("droll_logging_level", "debug")
    s = load_settings()
    assert s.max_dice == 12
    assert s.logging_level == "DEBUG"


def test_explicit_override_beats_env(monkeypatch):
    monkeypatch.setenv("DROLL_MAX_DICE", "12")
    assert load_settings(max_dice=40).max_dice == 40


def test_ceiling_can_be_disabled():
    assert Settings(max_dice=None).max_dice is None


def test_ceiling_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(max_dice=0)

import pytest
from pydantic import ValidationError
from fungi.core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("FUNGI_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FUNGI_LOG_FORMAT", raising=False)

    settings = Settings.load()
    assert settings.LOG_LEVEL == "WARNING"
    assert "%(message)s" in settings.LOG_FORMAT


def test_load_from_environment(monkeypatch):
    monkeypatch.setenv("FUNGI_LOG_LEVEL", "debug")
    monkeypatch.setenv("FUNGI_LOG_FORMAT", "%(levelname)s %(message)s")

    settings = Settings.load()
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "%(levelname)s %(message)s"


def test_invalid_level_rejected():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="LOUD")


def test_invalid_level_from_environment(monkeypatch):
    monkeypatch.setenv("FUNGI_LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        Settings.load()

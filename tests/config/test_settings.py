"""Tests for environment-driven settings."""

from zoneinfo import ZoneInfo

from studyengine.config.settings import Settings, get_local_zone, settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("STUDYENGINE_LOCAL_TIMEZONE", raising=False)
    monkeypatch.delenv("STUDYENGINE_LOG_LEVEL", raising=False)
    loaded = Settings(_env_file=None)
    assert loaded.local_timezone == ""
    assert loaded.log_level == "INFO"
    assert loaded.log_file == ""


def test_timezone_from_environment(monkeypatch):
    monkeypatch.setenv("STUDYENGINE_LOCAL_TIMEZONE", "Europe/Berlin")
    assert Settings(_env_file=None).local_timezone == "Europe/Berlin"


def test_unknown_timezone_falls_back_to_system(monkeypatch):
    monkeypatch.setenv("STUDYENGINE_LOCAL_TIMEZONE", "Mars/Olympus_Mons")
    assert Settings(_env_file=None).local_timezone == ""


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("STUDYENGINE_LOG_LEVEL", "debug")
    assert Settings(_env_file=None).log_level == "DEBUG"
    monkeypatch.setenv("STUDYENGINE_LOG_LEVEL", "chatty")
    assert Settings(_env_file=None).log_level == "INFO"


def test_get_local_zone(monkeypatch):
    monkeypatch.setattr(settings, "local_timezone", "")
    assert get_local_zone() is None
    monkeypatch.setattr(settings, "local_timezone", "Asia/Tokyo")
    assert get_local_zone() == ZoneInfo("Asia/Tokyo")

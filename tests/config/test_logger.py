"""Tests for logger setup."""

from loguru import logger

from studyengine.config.settings import settings
from studyengine.core.logger import setup_logger, setup_logger_from_settings


def test_setup_logger_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "studyengine.log"
    setup_logger(level="DEBUG", log_file=str(log_file))
    logger.info("schedule resolved", plan_id="plan1")

    # Reconfiguring removes (and closes) the file sink
    setup_logger(level="INFO")

    content = log_file.read_text()
    assert "schedule resolved" in content
    assert "plan1" in content


def test_setup_logger_from_settings(tmp_path, monkeypatch):
    log_file = tmp_path / "from_settings.log"
    monkeypatch.setattr(settings, "log_level", "WARNING")
    monkeypatch.setattr(settings, "log_file", str(log_file))
    setup_logger_from_settings()
    logger.info("below threshold")
    logger.warning("override missing a time")
    setup_logger(level="INFO")

    content = log_file.read_text()
    assert "override missing a time" in content
    assert "below threshold" not in content

"""Tests for settings loading and analytics logging."""

from __future__ import annotations

import logging

from manuscript_pilot import config as app_config
from manuscript_pilot.config import get_settings
from manuscript_pilot.logging_utils import get_logger, log_event, set_level


def test_defaults_use_ollama_fallback():
    settings = get_settings()

    assert settings.gemini_api_key is None
    assert settings.text_backend == "ollama"
    assert not settings.can_generate_images
    assert settings.ollama_model == "llama3"
    assert settings.text_model == "gemini-3-pro-preview"
    assert settings.log_level == logging.INFO


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "  key-123 ")
    monkeypatch.setenv("OLLAMA_MODEL", "mistral")
    monkeypatch.setenv("MANUSCRIPT_PILOT_PRO_IMAGE_MODEL", "custom-pro")
    monkeypatch.setenv("MANUSCRIPT_PILOT_LOG_LEVEL", "debug")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.gemini_api_key == "key-123"
    assert settings.text_backend == "gemini"
    assert settings.can_generate_images
    assert settings.ollama_model == "mistral"
    assert settings.pro_image_model == "custom-pro"
    assert settings.log_level == logging.DEBUG


def test_secrets_take_precedence_over_environment(monkeypatch):
    monkeypatch.setattr(app_config.st, "secrets", {"GEMINI_API_KEY": "from-secrets"}, raising=False)
    monkeypatch.setenv("GEMINI_API_KEY", "from-env")
    get_settings.cache_clear()

    assert get_settings().gemini_api_key == "from-secrets"


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("MANUSCRIPT_PILOT_LOG_LEVEL", "chatty")
    get_settings.cache_clear()

    assert get_settings().log_level == logging.INFO


def test_analytics_file_defaults_to_working_directory(monkeypatch, tmp_path):
    monkeypatch.delenv("MANUSCRIPT_PILOT_ANALYTICS_FILE", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()

    assert get_settings().analytics_file == tmp_path / "analytics.csv"


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_log_event_writes_header_once(tmp_path):
    target = tmp_path / "events.csv"

    log_event("CHAT", "first", path=target)
    log_event("FIGURE", "Mode: edit, model: flash\nsecond line", path=target)

    rows = target.read_text(encoding="utf-8").splitlines()
    assert rows[0] == "timestamp,event_type,details"
    assert len(rows) == 3
    assert rows[1].endswith(",CHAT,first")
    assert rows[2].endswith(",FIGURE,Mode: edit; model: flash second line")


def test_log_event_write_failure_is_not_raised(tmp_path):
    log_event("CHAT", "details", path=tmp_path / "missing-dir" / "events.csv")

    assert not (tmp_path / "missing-dir").exists()


def test_set_level_adjusts_package_loggers():
    logger = get_logger("manuscript_pilot.test_probe")

    set_level(logging.WARNING)
    assert logger.level == logging.WARNING
    set_level(logging.INFO)
    assert logger.level == logging.INFO

"""Tests for the JSON settings file."""

import json
import logging

import pytest

import settings


@pytest.fixture
def settings_path(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setattr(settings, "_SETTINGS_PATH", str(path))
    return path


def test_missing_file_gives_defaults(settings_path):
    assert settings.load_settings() == settings._DEFAULTS


def test_malformed_file_gives_defaults_and_warns(settings_path, caplog):
    settings_path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="settings"):
        assert settings.load_settings() == settings._DEFAULTS
    assert "unreadable settings file" in caplog.text


def test_non_object_file_gives_defaults(settings_path):
    settings_path.write_text("[1, 2]", encoding="utf-8")
    assert settings.load_settings() == settings._DEFAULTS


def test_valid_values_are_loaded(settings_path):
    settings_path.write_text(json.dumps({
        "dark_mode": True,
        "log_level": "debug",
        "window_width": 640,
    }), encoding="utf-8")
    assert settings.load_settings() == {"dark_mode": True, "log_level": "DEBUG"}


def test_wrong_types_fall_back_to_defaults(settings_path, caplog):
    settings_path.write_text(json.dumps({
        "dark_mode": "yes",
        "log_level": "LOUD",
    }), encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="settings"):
        assert settings.load_settings() == settings._DEFAULTS
    assert "unknown log_level" in caplog.text


def test_loaded_dict_is_a_copy(settings_path):
    loaded = settings.load_settings()
    loaded["dark_mode"] = True
    assert settings._DEFAULTS["dark_mode"] is False

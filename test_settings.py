"""Tests for the read-only settings loader."""

import json

from settings import load_settings


def _write(tmp_path, payload):
    path = tmp_path / "settings.json"
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload),
                    encoding="utf-8")
    return str(path)


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(str(tmp_path / "nope.json"))
    assert settings == {
        "window_width": 500,
        "window_height": 500,
        "always_on_top": False,
        "log_level": "WARNING",
    }


def test_stored_values_override_defaults(tmp_path):
    path = _write(tmp_path, {
        "window_width": 640, "window_height": 480,
        "always_on_top": True, "log_level": "debug",
    })
    settings = load_settings(path)
    assert settings["window_width"] == 640
    assert settings["window_height"] == 480
    assert settings["always_on_top"] is True
    assert settings["log_level"] == "DEBUG"


def test_wrongly_typed_keys_are_ignored(tmp_path):
    path = _write(tmp_path, {
        "window_width": "wide", "window_height": True,
        "always_on_top": 1, "log_level": "LOUD",
    })
    settings = load_settings(path)
    assert settings["window_width"] == 500
    assert settings["window_height"] == 500
    assert settings["always_on_top"] is False
    assert settings["log_level"] == "WARNING"


def test_malformed_json_falls_back(tmp_path, caplog):
    path = _write(tmp_path, "{not json")
    assert load_settings(path)["window_width"] == 500
    assert "using defaults" in caplog.text


def test_non_object_json_falls_back(tmp_path):
    path = _write(tmp_path, [1, 2, 3])
    assert load_settings(path)["log_level"] == "WARNING"


def test_default_path_is_used(tmp_path, monkeypatch):
    path = _write(tmp_path, {"window_width": 321})
    monkeypatch.setattr("settings._SETTINGS_PATH", path)
    assert load_settings()["window_width"] == 321

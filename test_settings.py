"""Settings persistence tests."""

import json

import pytest

import settings
from selection import SelectionMode


@pytest.fixture
def settings_path(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setattr(settings, "_SETTINGS_PATH", str(path))
    return path


def test_defaults_when_missing(settings_path):
    loaded = settings.load_settings()
    assert loaded == {"selection_mode": "range", "window_width": None, "window_height": None}
    assert settings.selection_mode(loaded) is SelectionMode.RANGE


def test_round_trip(settings_path):
    settings.save_settings({"selection_mode": "single", "window_width": 300, "window_height": 260})
    loaded = settings.load_settings()
    assert loaded["window_width"] == 300
    assert loaded["window_height"] == 260
    assert settings.selection_mode(loaded) is SelectionMode.SINGLE


def test_corrupt_file_falls_back(settings_path, caplog):
    settings_path.write_text("{not json", encoding="utf-8")
    with caplog.at_level("WARNING"):
        loaded = settings.load_settings()
    assert loaded["selection_mode"] == "range"
    assert "Ignoring unreadable settings file" in caplog.text


def test_mistyped_values_ignored(settings_path):
    settings_path.write_text(json.dumps({
        "selection_mode": "multi",
        "window_width": "wide",
        "window_height": True,
    }), encoding="utf-8")
    loaded = settings.load_settings()
    assert loaded == {"selection_mode": "range", "window_width": None, "window_height": None}


def test_non_object_file(settings_path):
    settings_path.write_text("[1, 2]", encoding="utf-8")
    assert settings.load_settings()["selection_mode"] == "range"


def test_update_merges_changes(settings_path):
    settings.save_settings({"selection_mode": "single", "window_width": 300, "window_height": 260})
    assert settings.update_settings(window_width=420) is True
    loaded = settings.load_settings()
    assert loaded["window_width"] == 420
    assert loaded["window_height"] == 260
    assert loaded["selection_mode"] == "single"


def test_update_unwritable_location(tmp_path, monkeypatch, caplog):
    missing_dir = tmp_path / "missing" / "settings.json"
    monkeypatch.setattr(settings, "_SETTINGS_PATH", str(missing_dir))
    with caplog.at_level("WARNING"):
        assert settings.update_settings(selection_mode="single") is False
    assert "Could not save settings" in caplog.text
    assert not missing_dir.exists()

"""Tests for settings persistence."""

import json
import os
import sys

# Add src to path so we can import the modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from config.settings import Settings, get_default_settings, load_settings, save_settings
from constants import API_BASE_URL, DEFAULT_PAGE_SIZE


def test_defaults():
    settings = Settings()
    assert settings.api_base_url == API_BASE_URL
    assert settings.page_size == DEFAULT_PAGE_SIZE
    assert settings.request_timeout is None
    assert settings.keep_position_filter is False


def test_missing_file_created_with_defaults(tmp_path):
    config_file = tmp_path / "nested" / "config.json"

    loaded = load_settings(str(config_file))

    assert loaded == get_default_settings()
    assert json.loads(config_file.read_text()) == get_default_settings()


def test_round_trip(tmp_path):
    config_file = str(tmp_path / "config.json")
    settings = Settings(
        api_base_url="http://localhost:9000/api",
        page_size=25,
        request_timeout=7.5,
        keep_position_filter=True,
    )

    assert save_settings(settings.to_dict(), config_file)
    restored = Settings.from_dict(load_settings(config_file))

    assert restored == settings


def test_partial_file_merged_over_defaults(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"page_size": 10, "unknown_key": 1}))

    loaded = load_settings(str(config_file))
    settings = Settings.from_dict(loaded)

    assert settings.page_size == 10
    assert settings.api_base_url == API_BASE_URL


def test_corrupt_file_falls_back_to_defaults(tmp_path, error_log):
    config_file = tmp_path / "config.json"
    config_file.write_text("{not json")

    assert load_settings(str(config_file)) == get_default_settings()
    assert "Failed to load settings" in error_log.read_text()


def test_values_normalized():
    settings = Settings.from_dict(
        {"api_base_url": "http://api.test/v1/", "page_size": 0, "request_timeout": 3}
    )
    assert settings.api_base_url == "http://api.test/v1"
    assert settings.page_size == 1
    assert settings.request_timeout == 3.0


def test_string_flags_converted():
    settings = Settings.from_dict(
        {"keep_position_filter": "false", "fullscreen": " True "}
    )
    assert settings.keep_position_filter is False
    assert settings.fullscreen is True

    settings = Settings.from_dict({"keep_position_filter": 1, "fullscreen": 0})
    assert settings.keep_position_filter is True
    assert settings.fullscreen is False

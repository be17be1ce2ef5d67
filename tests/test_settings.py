"""Tests for runtime config resolution."""

import json

import pytest

from termpress.settings import RuntimeConfig, load_settings, resolve_config


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"site_name": "from-file", "port": 4000, "dark": False}))
    return path


class TestLoadSettings:
    def test_missing_file_is_empty(self, tmp_path):
        assert load_settings(tmp_path / "nope.json") == {}

    def test_corrupt_file_is_empty(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json")
        assert load_settings(path) == {}

    def test_non_object_is_empty(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("[1, 2]")
        assert load_settings(path) == {}


class TestResolveConfig:
    def test_defaults(self, tmp_path):
        config = resolve_config(settings_path=tmp_path / "nope.json", environ={})
        assert config == RuntimeConfig()

    def test_settings_file_layer(self, settings_file):
        config = resolve_config(settings_path=settings_file, environ={})
        assert config.site_name == "from-file"
        assert config.port == 4000
        assert config.dark is False

    def test_env_beats_file(self, settings_file):
        config = resolve_config(
            settings_path=settings_file,
            environ={"TERMPRESS_SITE_NAME": "from-env", "TERMPRESS_HIGH_PERFORMANCE": "off"},
        )
        assert config.site_name == "from-env"
        assert config.high_performance is False
        assert config.port == 4000

    def test_overrides_beat_env(self, settings_file):
        config = resolve_config(
            {"site_name": "from-flag", "port": None},
            settings_path=settings_file,
            environ={"TERMPRESS_SITE_NAME": "from-env", "TERMPRESS_PORT": "5000"},
        )
        assert config.site_name == "from-flag"
        # None overrides fall through to lower layers.
        assert config.port == 5000

    def test_invalid_values_are_skipped(self, tmp_path):
        config = resolve_config(
            settings_path=tmp_path / "nope.json",
            environ={"TERMPRESS_PORT": "lots", "TERMPRESS_DARK": "maybe"},
        )
        assert config.port == RuntimeConfig.port
        assert config.dark is True

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"colour": "blue"}))
        assert resolve_config(settings_path=path, environ={}) == RuntimeConfig()

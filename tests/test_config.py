"""
Test configuration management.
"""

from pathlib import Path

import pytest

from shot_catalog.config import (
    DEFAULT_STATE_PATH,
    get_log_file,
    get_log_level,
    get_remote_config,
    get_state_path,
    load_config,
)


class TestLoadConfig:
    """Tests for load_config()."""

    def test_load_explicit_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("remote:\n  base_url: http://x/api\nlog_level: debug\n", encoding="utf-8")

        config = load_config(path)

        assert config["remote"]["base_url"] == "http://x/api"
        assert get_log_level(config) == "DEBUG"

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_no_file_found_gives_empty(self, tmp_path, monkeypatch):
        monkeypatch.setattr("shot_catalog.config.CONFIG_SEARCH_PATHS", [tmp_path / "none.yaml"])
        assert load_config() == {}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == {}

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(path)


class TestAccessors:
    """Tests for the config accessors."""

    def test_remote_defaults(self):
        remote = get_remote_config({})
        assert remote == {"base_url": "http://localhost:3001/api", "timeout": 10.0}

    def test_remote_overrides(self):
        remote = get_remote_config({"remote": {"timeout": "2"}})
        assert remote["timeout"] == 2.0
        assert remote["base_url"] == "http://localhost:3001/api"

    def test_state_path(self):
        assert get_state_path({}) == DEFAULT_STATE_PATH
        assert get_state_path({"state_path": "~/s.json"}) == Path.home() / "s.json"

    def test_log_level_default(self):
        assert get_log_level({}) == "INFO"

    def test_log_file(self):
        assert get_log_file({}) is None
        assert get_log_file({"log_file": "~/x.log"}) == Path.home() / "x.log"

"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

from collection_browser.config import (
    DEFAULT_API_KEY,
    DEFAULT_BASE_URL,
    DEFAULT_FAVORITES_PATH,
    load_config,
)

_ENV_VARS = [
    "RIJKS_API_KEY",
    "RIJKS_BASE_URL",
    "RIJKS_PAGE_SIZE",
    "RIJKS_TIMEOUT_S",
    "SEARCH_DEBOUNCE_S",
    "FAVORITES_PATH",
    "AUTO_SELECT_FIRST",
]


def _clear_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    def test_defaults(self, monkeypatch, tmp_path):
        _clear_env(monkeypatch)
        config = load_config(tmp_path / "missing.env")

        assert config.source.api_key == DEFAULT_API_KEY
        assert config.source.base_url == DEFAULT_BASE_URL
        assert config.source.page_size == 10
        assert config.debounce_s == 0.5
        assert config.favorites_path == DEFAULT_FAVORITES_PATH
        assert config.auto_select_first is False

    def test_environment_overrides(self, monkeypatch, tmp_path):
        _clear_env(monkeypatch)
        monkeypatch.setenv("RIJKS_API_KEY", "k")
        monkeypatch.setenv("RIJKS_BASE_URL", "https://example.org/api/nl")
        monkeypatch.setenv("RIJKS_PAGE_SIZE", "25")
        monkeypatch.setenv("RIJKS_TIMEOUT_S", "2.5")
        monkeypatch.setenv("SEARCH_DEBOUNCE_S", "0.1")
        monkeypatch.setenv("FAVORITES_PATH", str(tmp_path / "fav.json"))
        monkeypatch.setenv("AUTO_SELECT_FIRST", "yes")

        config = load_config(tmp_path / "missing.env")

        assert config.source.api_key == "k"
        assert config.source.base_url == "https://example.org/api/nl"
        assert config.source.page_size == 25
        assert config.source.timeout_s == 2.5
        assert config.debounce_s == 0.1
        assert config.favorites_path == Path(tmp_path / "fav.json")
        assert config.auto_select_first is True

    def test_env_file(self, monkeypatch, tmp_path):
        _clear_env(monkeypatch)
        env_file = tmp_path / ".env"
        env_file.write_text("RIJKS_API_KEY=from-file\n", encoding="utf-8")

        config = load_config(env_file)

        assert config.source.api_key == "from-file"

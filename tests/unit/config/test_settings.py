# tests/unit/config/test_settings.py - v1
"""Tests for config/settings.py - typed Settings and validation rules."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from stylemorph.config.settings import ConfigurationError, Settings, load_settings


class TestSettingsDefaults:
    def test_default_provider(self):
        s = Settings(_env_file=None)
        assert s.llm_default_provider == "google"
        assert s.llm_default_model == "gemini-2.5-flash"

    def test_default_limits(self):
        s = Settings(_env_file=None)
        assert s.max_input_files == 4
        assert s.run_history_cap == 20
        assert s.prompt_debounce_ms == 1000
        assert s.persist_runs_with_warnings is False

    def test_default_store(self):
        s = Settings(_env_file=None)
        assert s.store_backend == "json"
        assert s.store_root == Path("~/.stylemorph/store")

    def test_default_output(self):
        s = Settings(_env_file=None)
        assert s.stylesheet_file_name == "style.css"
        assert s.archive_name == "stylemorph-project.zip"


class TestSettingsValidation:
    def test_redis_without_url(self):
        with pytest.raises(ConfigurationError, match="STORE_REDIS_URL"):
            Settings(_env_file=None, store_backend="redis")

    def test_redis_with_url(self):
        s = Settings(_env_file=None, store_backend="redis", store_redis_url="redis://r")
        assert s.store_backend == "redis"

    def test_empty_extensions(self):
        with pytest.raises(ConfigurationError, match="INPUT_EXTENSIONS"):
            Settings(_env_file=None, input_extensions=" , ")

    @pytest.mark.parametrize("field", ["max_input_files", "run_history_cap"])
    def test_positive_limits(self, field):
        with pytest.raises(ValidationError, match=f"{field} must be >= 1"):
            Settings(_env_file=None, **{field: 0})

    def test_negative_debounce(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, prompt_debounce_ms=-1)

    def test_unknown_backend(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, store_backend="s3")


class TestSettingsHelpers:
    def test_extensions_list(self):
        s = Settings(_env_file=None, input_extensions=".HTML, .txt,,")
        assert s.input_extensions_list == [".html", ".txt"]

    def test_debounce_seconds(self):
        assert Settings(_env_file=None, prompt_debounce_ms=250).prompt_debounce_s == 0.25


class TestEnvironment:
    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("RUN_HISTORY_CAP", "5")
        monkeypatch.setenv("STORE_BACKEND", "sqlite")
        s = Settings(_env_file=None)
        assert s.run_history_cap == 5
        assert s.store_backend == "sqlite"

    def test_env_file(self, tmp_path):
        env = tmp_path / ".env"
        env.write_text("LLM_DEFAULT_PROVIDER=ollama\nLLM_DEFAULT_MODEL=llama3\n")
        s = Settings(_env_file=env)
        assert s.llm_default_provider == "ollama"
        assert s.llm_default_model == "llama3"

    def test_load_settings_overrides(self):
        s = load_settings(_env_file=None, max_input_files=2)
        assert s.max_input_files == 2

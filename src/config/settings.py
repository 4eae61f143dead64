# src/config/settings.py - v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for all deployment-specific settings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === LLM PROVIDERS ===
    llm_default_provider: Literal["google", "ollama"] = "google"
    llm_default_model: str = "gemini-2.5-flash"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 8192

    google_api_key: str = ""
    ollama_base_url: str = "http://127.0.0.1:11434"

    # === Inputs ===
    max_input_files: int = 4
    input_extensions: str = ".html,.htm,.txt"
    prompt_debounce_ms: int = 1000

    # === Run history ===
    run_history_cap: int = 20
    persist_runs_with_warnings: bool = False

    # === Persistence ===
    store_backend: Literal["memory", "json", "sqlite", "redis"] = "json"
    store_root: Path = Path("~/.stylemorph/store")
    store_redis_url: str = ""

    # === Output ===
    archive_name: str = "stylemorph-project.zip"
    stylesheet_file_name: str = "style.css"

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"  # size, or "none" for a single file
    log_retention: int = 5

    # --- Validators ---

    @field_validator("max_input_files", "run_history_cap")
    @classmethod
    def validate_positive(cls, v: int, info) -> int:  # noqa: N805
        if v < 1:
            raise ValueError(f"{info.field_name} must be >= 1")
        return v

    @field_validator("prompt_debounce_ms")
    @classmethod
    def validate_debounce(cls, v: int) -> int:  # noqa: N805
        if v < 0:
            raise ValueError("prompt_debounce_ms must be >= 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.store_backend == "redis" and not self.store_redis_url:
            errors.append("STORE_BACKEND=redis requires STORE_REDIS_URL")

        if not self.input_extensions_list:
            errors.append("INPUT_EXTENSIONS must list at least one extension")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def input_extensions_list(self) -> list[str]:
        """Parse comma-separated accepted input extensions (lowercase)."""
        return [
            e.strip().lower() for e in self.input_extensions.split(",") if e.strip()
        ]

    @property
    def prompt_debounce_s(self) -> float:
        return self.prompt_debounce_ms / 1000.0


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or CLI flags).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]

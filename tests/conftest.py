# tests/conftest.py - v1
"""Shared test fixtures for all unit tests.

Provides sample input files, an in-memory store, a stub generation gateway
and settings isolated from any local .env file. No network access.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from stylemorph.config.settings import Settings
from stylemorph.core.models import InputFile, ModelDescriptor
from stylemorph.gateway.base_gateway import GenerationGateway
from stylemorph.store.memory_store import MemoryKeyValueStore

CLEAN_STYLESHEET = "body { color: red; }"


def rewritten(file: InputFile) -> str:
    """Markup the stub gateway returns for ``file``."""
    return f"<html><!-- restyled {file.name} --></html>"


# === FIXTURES: Sample data ===


@pytest.fixture
def sample_file() -> InputFile:
    return InputFile(
        id="f1",
        name="index.html",
        content="<html><body><h1>Hello</h1></body></html>",
    )


@pytest.fixture
def sample_files(sample_file: InputFile) -> list[InputFile]:
    """Two files in upload order."""
    return [
        sample_file,
        InputFile(
            id="f2",
            name="about.html",
            content="<html><body><p>About us</p></body></html>",
        ),
    ]


@pytest.fixture
def sample_model() -> ModelDescriptor:
    return ModelDescriptor(id="gemini-2.5-flash", name="Gemini 2.5 Flash", provider="google")


# === FIXTURES: Collaborators ===


@pytest.fixture
def memory_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def stub_gateway() -> AsyncMock:
    """Gateway returning a clean stylesheet and one rewrite per file."""
    gateway = AsyncMock(spec=GenerationGateway)
    gateway.generate_stylesheet.return_value = CLEAN_STYLESHEET

    async def _rewrite(file, stylesheet, prompt, model):
        return rewritten(file)

    gateway.rewrite_document.side_effect = _rewrite
    gateway.list_local_models.return_value = []
    return gateway


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings that ignore .env and persist nothing outside tmp_path."""
    return Settings(
        _env_file=None,
        store_backend="memory",
        store_root=tmp_path / "store",
        prompt_debounce_ms=10,
    )

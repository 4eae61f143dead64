# tests/unit/gateway/test_model_catalog.py - v1
"""Tests for gateway/model_catalog.py."""

from __future__ import annotations

from stylemorph.core.models import ModelDescriptor
from stylemorph.gateway.model_catalog import DEFAULT_MODELS, find_model, merge_models


class TestMergeModels:
    def test_appends_new(self):
        local = [ModelDescriptor(id="llama3", name="llama3", provider="ollama")]
        merged = merge_models(DEFAULT_MODELS, local)
        assert [m.id for m in merged] == ["gemini-2.5-flash", "gemini-3-pro-preview", "llama3"]

    def test_skips_known_and_duplicates(self):
        dup = ModelDescriptor(id="gemini-2.5-flash", name="x", provider="ollama")
        llama = ModelDescriptor(id="llama3", name="llama3", provider="ollama")
        merged = merge_models(DEFAULT_MODELS, [dup, llama, llama])
        assert len(merged) == 3
        assert merged[0].provider == "google"


class TestFindModel:
    def test_found(self):
        assert find_model(DEFAULT_MODELS, "gemini-3-pro-preview").name == "Gemini 3 Pro"

    def test_missing(self):
        assert find_model(DEFAULT_MODELS, "gpt") is None

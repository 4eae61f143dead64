# src/gateway/model_catalog.py - v1
"""Selectable generation models: built-in cloud models plus local discovery."""

from __future__ import annotations

from collections.abc import Iterable

from stylemorph.core.models import ModelDescriptor

DEFAULT_MODELS: tuple[ModelDescriptor, ...] = (
    ModelDescriptor(id="gemini-2.5-flash", name="Gemini 2.5 Flash", provider="google"),
    ModelDescriptor(id="gemini-3-pro-preview", name="Gemini 3 Pro", provider="google"),
)


def merge_models(
    known: Iterable[ModelDescriptor], discovered: Iterable[ModelDescriptor]
) -> list[ModelDescriptor]:
    """Append discovered models whose ids are not already known."""
    merged = list(known)
    seen = {m.id for m in merged}
    for model in discovered:
        if model.id not in seen:
            merged.append(model)
            seen.add(model.id)
    return merged


def find_model(models: Iterable[ModelDescriptor], model_id: str) -> ModelDescriptor | None:
    return next((m for m in models if m.id == model_id), None)

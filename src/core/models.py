# src/core/models.py - v1
"""Shared Pydantic domain models used across modules.

No module redefines these types; all imports come from core.models.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


def _new_id() -> str:
    return str(uuid.uuid4())


# === INPUTS ===


class InputFile(BaseModel):
    """Uploaded source document. Immutable once created, removed by id."""

    model_config = {"frozen": True}

    id: str = Field(default_factory=_new_id)
    name: str
    content: str


class InputSnapshot(BaseModel):
    """Captured (file-set, prompt) pair eligible for undo/redo."""

    model_config = {"frozen": True}

    files: tuple[InputFile, ...] = ()
    prompt: str = ""


# === OUTPUTS ===


class ArtifactKind(str, Enum):
    """Kind of generated artifact."""

    STYLESHEET = "stylesheet"
    MARKUP = "markup"


class GeneratedArtifact(BaseModel):
    """One unit of generated output (stylesheet or rewritten document)."""

    model_config = {"frozen": True}

    file_name: str
    content: str
    kind: ArtifactKind


class RunRecord(BaseModel):
    """Completed run kept in the persisted run log."""

    model_config = {"frozen": True}

    id: str = Field(default_factory=_new_id)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    prompt: str
    artifacts: tuple[GeneratedArtifact, ...]


# === PIPELINE ===


class PipelineStatus(str, Enum):
    """Orchestrator state."""

    IDLE = "idle"
    ANALYZING = "analyzing"
    GENERATING_STYLESHEET = "generating_stylesheet"
    REWRITING_DOCUMENTS = "rewriting_documents"
    COMPLETED = "completed"
    ERROR = "error"

    @property
    def in_flight(self) -> bool:
        """Whether a run is currently executing in this state."""
        return self in _IN_FLIGHT


_IN_FLIGHT = frozenset(
    {
        PipelineStatus.ANALYZING,
        PipelineStatus.GENERATING_STYLESHEET,
        PipelineStatus.REWRITING_DOCUMENTS,
    }
)


# === TEMPLATES & MODELS ===


class StyleTemplate(BaseModel):
    """Reusable style request shown in the template gallery."""

    id: str = Field(default_factory=_new_id)
    name: str
    prompt: str
    like_count: int = 0
    is_liked: bool = False
    is_user_authored: bool = False


class ModelDescriptor(BaseModel):
    """Generation model selectable by the user."""

    model_config = {"frozen": True}

    id: str
    name: str
    provider: Literal["google", "ollama"]

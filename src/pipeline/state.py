# src/pipeline/state.py - v1
"""Accumulated state of one pipeline run, plus the outcome handed to callers.

Steps never mutate a RunContext; each returns an updated copy, so a run
can be replayed deterministically against stub gateways.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from stylemorph.core.models import (
    GeneratedArtifact,
    InputFile,
    ModelDescriptor,
    PipelineStatus,
    RunRecord,
)


class RunContext(BaseModel):
    """Inputs captured at start time plus everything produced so far."""

    model_config = {"frozen": True}

    # === IDENTITY ===
    run_id: str
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # === INPUTS (copied at start; later edits do not reach the run) ===
    files: tuple[InputFile, ...]
    prompt: str
    model: ModelDescriptor
    stylesheet_file_name: str = "style.css"

    # === PRODUCED ===
    stylesheet: str = ""
    warnings: tuple[str, ...] = ()
    documents: tuple[GeneratedArtifact, ...] = ()
    artifacts: tuple[GeneratedArtifact, ...] = ()


class RunOutcome(BaseModel):
    """What ``PipelineOrchestrator.start`` reports back."""

    run_id: str
    status: PipelineStatus
    artifacts: tuple[GeneratedArtifact, ...] = ()
    warnings: tuple[str, ...] = ()
    error: str | None = None
    record: RunRecord | None = None
    stale: bool = False

    @property
    def persisted(self) -> bool:
        """Whether a RunRecord was written to the run history."""
        return self.record is not None

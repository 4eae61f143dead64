# src/pipeline/orchestrator.py - v1
"""Pipeline orchestrator: the run state machine.

    Idle --start(valid)--> Analyzing --> GeneratingStylesheet
         --> RewritingDocuments --> Completed
    any in-flight state --gateway failure--> Error
    any state --reset--> Idle

Completed and Error stay put until the next ``start`` or ``reset``. At most
one run is in flight. Each run carries a token; a gateway call that
resolves after ``reset`` (or after a newer run has started) no longer
matches the current token and its result is dropped.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Sequence

from stylemorph.core.errors import GatewayError, InputValidationError, PipelineBusyError
from stylemorph.core.models import (
    GeneratedArtifact,
    InputFile,
    ModelDescriptor,
    PipelineStatus,
    RunRecord,
)
from stylemorph.gateway.base_gateway import GenerationGateway
from stylemorph.history.run_history import RunHistoryStore
from stylemorph.logging.context import clear_context, set_run_context, set_stage_context
from stylemorph.pipeline.state import RunContext, RunOutcome
from stylemorph.pipeline.steps import PipelineStep, build_plan

logger = logging.getLogger(__name__)

NO_FILES_MESSAGE = "Please upload at least one file."
BLANK_PROMPT_MESSAGE = "Please describe how you want to restyle the website."
BUSY_MESSAGE = "A run is already in progress."


class PipelineOrchestrator:
    """Sequences gateway calls, validation and run-history persistence.

    Args:
        gateway: Text-generation collaborator.
        run_history: Store receiving one record per clean completed run.
        stylesheet_file_name: File name of the stylesheet artifact.
        persist_runs_with_warnings: Also store runs whose stylesheet has
            structural findings (off by default).
        on_status: Called with each new PipelineStatus.
        on_progress: Called with each progress message of the current run.
        plan_builder: Callable(file_count) -> list[PipelineStep].
    """

    def __init__(
        self,
        gateway: GenerationGateway,
        run_history: RunHistoryStore,
        stylesheet_file_name: str = "style.css",
        persist_runs_with_warnings: bool = False,
        on_status: Callable[[PipelineStatus], None] | None = None,
        on_progress: Callable[[str], None] | None = None,
        plan_builder: Callable[[int], list[PipelineStep]] = build_plan,
    ) -> None:
        self._gateway = gateway
        self._run_history = run_history
        self._stylesheet_file_name = stylesheet_file_name
        self._persist_runs_with_warnings = persist_runs_with_warnings
        self._on_status = on_status
        self._on_progress = on_progress
        self._plan_builder = plan_builder

        self._status = PipelineStatus.IDLE
        self._token: str | None = None
        self._status_message = ""
        self._error: str | None = None
        self._artifacts: tuple[GeneratedArtifact, ...] = ()
        self._warnings: tuple[str, ...] = ()

    # --- Inspection ---

    @property
    def status(self) -> PipelineStatus:
        return self._status

    @property
    def status_message(self) -> str:
        return self._status_message

    @property
    def error(self) -> str | None:
        """Message of the last failure (or of completion with warnings)."""
        return self._error

    @property
    def artifacts(self) -> tuple[GeneratedArtifact, ...]:
        return self._artifacts

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._warnings

    @property
    def busy(self) -> bool:
        return self._status.in_flight

    # --- Commands ---

    @staticmethod
    def validate_inputs(files: Sequence[InputFile], prompt: str) -> None:
        """Raise InputValidationError if a run could not start."""
        if not files:
            raise InputValidationError(NO_FILES_MESSAGE)
        if not prompt.strip():
            raise InputValidationError(BLANK_PROMPT_MESSAGE)

    async def start(
        self,
        files: Sequence[InputFile],
        prompt: str,
        model: ModelDescriptor,
    ) -> RunOutcome:
        """Run the full pipeline on a copy of the given inputs.

        Raises:
            PipelineBusyError: A run is already in flight.
            InputValidationError: No files or a blank prompt; state unchanged.

        Gateway failures, and any other failure inside a step, do not raise:
        they end the run in Error and are reported through the returned
        RunOutcome.
        """
        if self.busy:
            raise PipelineBusyError(BUSY_MESSAGE)
        self.validate_inputs(files, prompt)

        token = str(uuid.uuid4())
        self._token = token
        self._error = None
        self._artifacts = ()
        self._warnings = ()
        set_run_context(token)

        ctx = RunContext(
            run_id=token,
            files=tuple(files),
            prompt=prompt,
            model=model,
            stylesheet_file_name=self._stylesheet_file_name,
        )
        logger.info(
            "Run started: %d files, model=%s", len(ctx.files), model.id,
        )
        self._transition(PipelineStatus.ANALYZING)
        progress = self._progress_for(token)

        try:
            for step in self._plan_builder(len(ctx.files)):
                self._transition(step.status)
                set_stage_context(step.name)
                ctx = await step.run(ctx, self._gateway, progress)
                if self._token != token:
                    return self._discard(token)
        except GatewayError as e:
            if self._token != token:
                return self._discard(token)
            return self._fail(token, e)
        except Exception as e:
            if self._token != token:
                return self._discard(token)
            logger.exception("Unexpected failure in run %s", token)
            wrapped = GatewayError(str(e) or "An error occurred during processing.")
            wrapped.__cause__ = e
            return self._fail(token, wrapped)
        finally:
            clear_context()

        return await self._complete(ctx)

    def reset(self) -> None:
        """Return to Idle, dropping results, errors and any in-flight run."""
        if self.busy:
            logger.info("Reset during run %s; its late results will be dropped", self._token)
        self._token = None
        self._error = None
        self._artifacts = ()
        self._warnings = ()
        self._status_message = ""
        self._transition(PipelineStatus.IDLE)

    def show_record(self, record: RunRecord) -> None:
        """Display a past run as the completed result without re-running it."""
        if self.busy:
            raise PipelineBusyError(BUSY_MESSAGE)
        self._token = None
        self._error = None
        self._warnings = ()
        self._artifacts = record.artifacts
        self._status_message = ""
        self._transition(PipelineStatus.COMPLETED)

    # --- Internals ---

    async def _complete(self, ctx: RunContext) -> RunOutcome:
        self._artifacts = ctx.artifacts
        self._warnings = ctx.warnings
        self._transition(PipelineStatus.COMPLETED)
        self._status_message = "Done"

        record: RunRecord | None = None
        if ctx.warnings and not self._persist_runs_with_warnings:
            self._error = (
                "Processing complete, but stylesheet validation found issues: "
                + ", ".join(ctx.warnings)
            )
            logger.warning("Run %s completed with warnings; not saved to history", ctx.run_id)
        else:
            record = RunRecord(prompt=ctx.prompt, artifacts=ctx.artifacts)
            await self._run_history.append(record)
            logger.info("Run %s completed and saved as %s", ctx.run_id, record.id)

        return RunOutcome(
            run_id=ctx.run_id,
            status=PipelineStatus.COMPLETED,
            artifacts=ctx.artifacts,
            warnings=ctx.warnings,
            error=self._error,
            record=record,
        )

    def _fail(self, token: str, error: GatewayError) -> RunOutcome:
        logger.error("Run %s failed: %s", token, error)
        self._error = str(error) or "An error occurred during processing."
        self._artifacts = ()
        self._warnings = ()
        self._transition(PipelineStatus.ERROR)
        return RunOutcome(run_id=token, status=PipelineStatus.ERROR, error=self._error)

    def _discard(self, token: str) -> RunOutcome:
        logger.info("Dropping result of superseded run %s", token)
        return RunOutcome(run_id=token, status=self._status, stale=True)

    def _progress_for(self, token: str) -> Callable[[str], None]:
        def progress(message: str) -> None:
            if self._token != token:
                return
            self._status_message = message
            logger.info(message)
            if self._on_progress is not None:
                self._on_progress(message)

        return progress

    def _transition(self, status: PipelineStatus) -> None:
        if status is self._status:
            return
        logger.debug("Pipeline %s -> %s", self._status.value, status.value)
        self._status = status
        if self._on_status is not None:
            self._on_status(status)

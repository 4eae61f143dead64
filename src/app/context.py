# src/app/context.py - v1
"""Application context: every long-lived component, built once at startup.

Nothing is initialised at import time. ``load()`` reads persisted state
(theme, templates, run history) and discovers local models; each mutating
operation writes back through the owning component.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from stylemorph.config.settings import Settings
from stylemorph.core.errors import PersistenceError, RunNotFoundError
from stylemorph.core.models import ModelDescriptor, RunRecord
from stylemorph.export.commands import CommandBindings
from stylemorph.gateway.base_gateway import GenerationGateway
from stylemorph.gateway.llm_gateway import LLMGenerationGateway
from stylemorph.gateway.model_catalog import DEFAULT_MODELS, find_model, merge_models
from stylemorph.history.run_history import RunHistoryStore
from stylemorph.pipeline.orchestrator import PipelineOrchestrator
from stylemorph.pipeline.state import RunOutcome
from stylemorph.store.base_store import THEME_KEY, BaseKeyValueStore
from stylemorph.store.store_factory import create_store
from stylemorph.templates.catalog import TemplateCatalog
from stylemorph.workspace.workspace import InputWorkspace

logger = logging.getLogger(__name__)

Theme = Literal["dark", "light"]
DEFAULT_THEME: Theme = "dark"


class AppContext:
    """Wires settings, persistence, gateway and the orchestration engine.

    Args:
        settings: Application settings.
        store: Persistence backend (defaults to the configured one).
        gateway: Generation gateway (defaults to the LLM-backed one).
    """

    def __init__(
        self,
        settings: Settings,
        store: BaseKeyValueStore | None = None,
        gateway: GenerationGateway | None = None,
    ) -> None:
        self.settings = settings
        self.store = store if store is not None else create_store(settings)
        self.gateway = gateway if gateway is not None else LLMGenerationGateway(settings)

        self.run_history = RunHistoryStore(self.store, cap=settings.run_history_cap)
        self.templates = TemplateCatalog(self.store)
        self.workspace = InputWorkspace(
            max_files=settings.max_input_files,
            debounce_s=settings.prompt_debounce_s,
        )
        self.orchestrator = PipelineOrchestrator(
            self.gateway,
            self.run_history,
            stylesheet_file_name=settings.stylesheet_file_name,
            persist_runs_with_warnings=settings.persist_runs_with_warnings,
        )

        self.models: list[ModelDescriptor] = list(DEFAULT_MODELS)
        self.selected_model = self._default_model()
        self.theme: Theme = DEFAULT_THEME

    # --- Lifecycle ---

    async def load(self, discover_models: bool = True) -> None:
        """Read persisted state; missing or malformed values become defaults."""
        raw_theme = await self.store.get(THEME_KEY)
        self.theme = raw_theme if raw_theme in ("dark", "light") else DEFAULT_THEME
        await self.templates.load()
        await self.run_history.load()
        if discover_models:
            await self.refresh_models()

    async def refresh_models(self) -> list[ModelDescriptor]:
        local = await self.gateway.list_local_models()
        self.models = merge_models(self.models, local)
        if local:
            logger.info("Found %d local models", len(local))
        return self.models

    def select_model(self, model_id: str) -> bool:
        model = find_model(self.models, model_id)
        if model is None:
            return False
        self.selected_model = model
        return True

    async def toggle_theme(self) -> Theme:
        self.theme = "light" if self.theme == "dark" else "dark"
        try:
            await self.store.set(THEME_KEY, self.theme)
        except PersistenceError as e:
            logger.error("Failed to persist theme preference: %s", e)
        return self.theme

    # --- Runs ---

    async def generate(self) -> RunOutcome:
        """Start a run on the current workspace inputs."""
        return await self.orchestrator.start(
            self.workspace.files, self.workspace.prompt, self.selected_model,
        )

    def open_run(self, record_id: str) -> RunRecord:
        """Show a stored run and put its prompt back in the workspace."""
        record = self.run_history.get(record_id)
        if record is None:
            raise RunNotFoundError(f"No run with id {record_id!r}")
        self.orchestrator.show_record(record)
        self.workspace.restore_prompt(record.prompt)
        return record

    async def delete_run(self, record_id: str) -> bool:
        return await self.run_history.remove(record_id)

    def new_project(self) -> None:
        self.workspace.reset()
        self.orchestrator.reset()

    def commands(self, archive_path: Path | None = None) -> CommandBindings:
        return CommandBindings(
            self.workspace,
            lambda: self.orchestrator.artifacts,
            archive_path or Path(self.settings.archive_name),
        )

    def _default_model(self) -> ModelDescriptor:
        model = find_model(self.models, self.settings.llm_default_model)
        if model is not None:
            return model
        model = ModelDescriptor(
            id=self.settings.llm_default_model,
            name=self.settings.llm_default_model,
            provider=self.settings.llm_default_provider,
        )
        self.models.append(model)
        return model

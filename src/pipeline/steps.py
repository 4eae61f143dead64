# src/pipeline/steps.py - v1
"""Pipeline steps: each maps the accumulated RunContext to the next one.

A run's plan is an explicit ordered list built from the number of input
files: stylesheet generation, validation, one rewrite step per document in
upload order, then assembly. The orchestrator consumes it one step at a
time, so no two gateway calls of a run are ever concurrent.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from stylemorph.core.models import ArtifactKind, GeneratedArtifact, PipelineStatus
from stylemorph.gateway.base_gateway import GenerationGateway
from stylemorph.pipeline.state import RunContext
from stylemorph.validation.stylesheet_validator import validate_stylesheet

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]
StepFn = Callable[[RunContext, GenerationGateway, ProgressCallback], Awaitable[RunContext]]


@dataclass(frozen=True)
class PipelineStep:
    """One entry of a run plan."""

    name: str
    status: PipelineStatus
    run: StepFn


async def generate_stylesheet(
    ctx: RunContext, gateway: GenerationGateway, progress: ProgressCallback
) -> RunContext:
    progress(f"Generating theme with {ctx.model.name}...")
    stylesheet = await gateway.generate_stylesheet(ctx.files, ctx.prompt, ctx.model)
    logger.info("Stylesheet generated (%d chars)", len(stylesheet))
    return ctx.model_copy(update={"stylesheet": stylesheet})


async def check_stylesheet(
    ctx: RunContext, gateway: GenerationGateway, progress: ProgressCallback
) -> RunContext:
    """Record structural findings as warnings; never aborts the run."""
    findings = validate_stylesheet(ctx.stylesheet)
    if findings:
        logger.warning("Stylesheet validation found %d issues: %s", len(findings), findings)
        progress(f"Stylesheet validation warning: {findings[0]}. Attempting to proceed...")
    return ctx.model_copy(update={"warnings": tuple(findings)})


async def rewrite_document(
    ctx: RunContext,
    gateway: GenerationGateway,
    progress: ProgressCallback,
    *,
    index: int,
) -> RunContext:
    """Rewrite the ``index``-th input file (0-based) against the stylesheet."""
    file = ctx.files[index]
    progress(f"rewriting {file.name} ({index + 1}/{len(ctx.files)})")
    markup = await gateway.rewrite_document(file, ctx.stylesheet, ctx.prompt, ctx.model)
    artifact = GeneratedArtifact(
        file_name=file.name, content=markup, kind=ArtifactKind.MARKUP,
    )
    return ctx.model_copy(update={"documents": (*ctx.documents, artifact)})


async def assemble_artifacts(
    ctx: RunContext, gateway: GenerationGateway, progress: ProgressCallback
) -> RunContext:
    """Stylesheet first, then documents in input order."""
    stylesheet = GeneratedArtifact(
        file_name=ctx.stylesheet_file_name,
        content=ctx.stylesheet,
        kind=ArtifactKind.STYLESHEET,
    )
    return ctx.model_copy(update={"artifacts": (stylesheet, *ctx.documents)})


def build_plan(file_count: int) -> list[PipelineStep]:
    """Ordered steps for a run over ``file_count`` documents."""
    plan = [
        PipelineStep("generate_stylesheet", PipelineStatus.GENERATING_STYLESHEET, generate_stylesheet),
        PipelineStep("check_stylesheet", PipelineStatus.GENERATING_STYLESHEET, check_stylesheet),
    ]
    for i in range(file_count):
        plan.append(
            PipelineStep(
                f"rewrite_document[{i}]",
                PipelineStatus.REWRITING_DOCUMENTS,
                functools.partial(rewrite_document, index=i),
            )
        )
    plan.append(
        PipelineStep("assemble_artifacts", PipelineStatus.REWRITING_DOCUMENTS, assemble_artifacts)
    )
    return plan

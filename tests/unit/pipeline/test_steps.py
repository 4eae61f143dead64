# tests/unit/pipeline/test_steps.py - v1
"""Tests for pipeline/steps.py - individual steps and plan construction."""

from __future__ import annotations

import pytest

from stylemorph.core.models import ArtifactKind, PipelineStatus
from stylemorph.pipeline.state import RunContext, RunOutcome
from stylemorph.pipeline.steps import (
    assemble_artifacts,
    build_plan,
    check_stylesheet,
    generate_stylesheet,
    rewrite_document,
)
from tests.conftest import CLEAN_STYLESHEET, rewritten


@pytest.fixture
def ctx(sample_files, sample_model) -> RunContext:
    return RunContext(
        run_id="run_001", files=tuple(sample_files), prompt="dark", model=sample_model,
    )


class TestBuildPlan:
    def test_one_rewrite_step_per_file(self):
        names = [s.name for s in build_plan(3)]
        assert names == [
            "generate_stylesheet",
            "check_stylesheet",
            "rewrite_document[0]",
            "rewrite_document[1]",
            "rewrite_document[2]",
            "assemble_artifacts",
        ]

    def test_statuses(self):
        plan = build_plan(1)
        assert [s.status for s in plan] == [
            PipelineStatus.GENERATING_STYLESHEET,
            PipelineStatus.GENERATING_STYLESHEET,
            PipelineStatus.REWRITING_DOCUMENTS,
            PipelineStatus.REWRITING_DOCUMENTS,
        ]


class TestSteps:
    @pytest.mark.asyncio
    async def test_generate_stylesheet(self, ctx, stub_gateway):
        messages: list[str] = []
        out = await generate_stylesheet(ctx, stub_gateway, messages.append)
        assert out.stylesheet == CLEAN_STYLESHEET
        assert ctx.stylesheet == ""
        assert messages == ["Generating theme with Gemini 2.5 Flash..."]

    @pytest.mark.asyncio
    async def test_check_clean(self, ctx, stub_gateway):
        messages: list[str] = []
        out = await check_stylesheet(
            ctx.model_copy(update={"stylesheet": CLEAN_STYLESHEET}),
            stub_gateway,
            messages.append,
        )
        assert out.warnings == ()
        assert messages == []

    @pytest.mark.asyncio
    async def test_check_records_findings(self, ctx, stub_gateway):
        out = await check_stylesheet(
            ctx.model_copy(update={"stylesheet": "a {"}), stub_gateway, lambda m: None,
        )
        assert out.warnings == ("missing 1 closing brace '}'",)

    @pytest.mark.asyncio
    async def test_rewrite_document_appends(self, ctx, stub_gateway, sample_files):
        messages: list[str] = []
        out = await rewrite_document(ctx, stub_gateway, messages.append, index=1)
        assert len(out.documents) == 1
        assert out.documents[0].file_name == "about.html"
        assert out.documents[0].content == rewritten(sample_files[1])
        assert messages == ["rewriting about.html (2/2)"]

    @pytest.mark.asyncio
    async def test_assemble_puts_stylesheet_first(self, ctx, stub_gateway):
        ctx = ctx.model_copy(update={"stylesheet": CLEAN_STYLESHEET})
        ctx = await rewrite_document(ctx, stub_gateway, lambda m: None, index=0)
        out = await assemble_artifacts(ctx, stub_gateway, lambda m: None)
        assert [a.kind for a in out.artifacts] == [
            ArtifactKind.STYLESHEET,
            ArtifactKind.MARKUP,
        ]
        assert out.artifacts[0].file_name == "style.css"


class TestRunOutcome:
    def test_persisted_flag(self):
        outcome = RunOutcome(run_id="r", status=PipelineStatus.ERROR, error="x")
        assert outcome.persisted is False
        assert outcome.stale is False

"""Unit tests for PlanProvider and plan sources (configurator.planner).

Tests cover:
- Static plans for every registered capability
- Unknown capability raises
- Generator plans win when valid
- Generator failures, malformed output and empty steps fall back to static
- parse_steps validation
"""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from configurator.models import PlanSourceKind, StepAction
from configurator.planner import (
    GeneratedPlanSource,
    PlanGenerationError,
    PlanProvider,
    PromptBuilder,
    StaticPlanSource,
    parse_steps,
)
from configurator.executor.handlers import build_registry
from configurator.registry import CAPABILITY_IDS, UnknownCapabilityError

pytestmark = pytest.mark.unit


def _generator(document: Any = None, error: Exception | None = None) -> MagicMock:
    generator = MagicMock()
    if error is not None:
        generator.generate = AsyncMock(side_effect=error)
    else:
        generator.generate = AsyncMock(return_value=document)
    return generator


GENERATED_DOCUMENT = {
    "steps": [
        {
            "action": "addDependency",
            "target": "package.json",
            "description": "Add sonner",
            "dependencies": {"sonner": "^1.5.0"},
        },
        {
            "action": "createFile",
            "target": "src/hooks/useToast.ts",
            "content": "export {}\n",
        },
    ]
}


# ---------------------------------------------------------------------------
# Static plans
# ---------------------------------------------------------------------------


class TestStaticPlans:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("capability", CAPABILITY_IDS)
    async def test_every_capability_has_a_plan(self, capability, vite_analysis):
        plan = await PlanProvider().create_plan(capability, vite_analysis)
        assert plan.capability == capability
        assert plan.source == PlanSourceKind.STATIC
        assert plan.steps
        assert plan.steps[0].action == StepAction.ADD_DEPENDENCY

    @pytest.mark.asyncio
    async def test_unknown_capability(self, vite_analysis):
        with pytest.raises(UnknownCapabilityError):
            await PlanProvider().create_plan("graphql", vite_analysis)

    @pytest.mark.asyncio
    async def test_tailwind_dev_dependencies(self, vite_analysis):
        plan = await PlanProvider().create_plan("tailwind", vite_analysis)
        dev_step = plan.steps[0]
        assert dev_step.is_dev is True
        assert set(dev_step.dependencies) == {"tailwindcss", "postcss", "autoprefixer"}
        assert plan.steps[1].is_dev is False

    @pytest.mark.asyncio
    async def test_toast_plan_carries_content(self, vite_analysis):
        plan = await PlanProvider().create_plan("toast", vite_analysis)
        modify_steps = [s for s in plan.steps if s.action == StepAction.MODIFY_FILE]
        assert [s.search_pattern for s in modify_steps] == [
            "import { Routes",
            '<div className="app">',
        ]
        create = plan.steps[-1]
        assert create.target == "src/hooks/useToast.ts"
        assert "sonner" in create.content

    @pytest.mark.asyncio
    async def test_static_plans_are_fresh_copies(self, vite_analysis):
        provider = PlanProvider()
        first = await provider.create_plan("toast", vite_analysis)
        first.steps[0].dependencies["injected"] = "1"
        second = await provider.create_plan("toast", vite_analysis)
        assert "injected" not in second.steps[0].dependencies

    @pytest.mark.asyncio
    async def test_static_source_without_handler(self, vite_analysis):
        source = StaticPlanSource(build_registry())
        assert await source.try_generate("graphql", vite_analysis) is None


# ---------------------------------------------------------------------------
# Generated plans
# ---------------------------------------------------------------------------


class TestGeneratedPlans:
    @pytest.mark.asyncio
    async def test_generated_plan_used(self, vite_analysis):
        generator = _generator(GENERATED_DOCUMENT)
        plan = await PlanProvider(generator=generator).create_plan("toast", vite_analysis)

        assert plan.source == PlanSourceKind.GENERATED
        assert plan.steps[0].dependencies == {"sonner": "^1.5.0"}
        system, user = generator.generate.call_args.args
        assert "Sonner" in system
        assert "src/App.tsx" in user

    @pytest.mark.asyncio
    async def test_generator_error_falls_back(self, vite_analysis):
        generator = _generator(error=PlanGenerationError("Cannot connect"))
        plan = await PlanProvider(generator=generator).create_plan("redux", vite_analysis)
        assert plan.source == PlanSourceKind.STATIC
        assert plan.steps

    @pytest.mark.asyncio
    async def test_unexpected_exception_falls_back(self, vite_analysis):
        generator = _generator(error=RuntimeError("boom"))
        plan = await PlanProvider(generator=generator).create_plan("forms", vite_analysis)
        assert plan.source == PlanSourceKind.STATIC

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "document",
        [
            {"plan": []},
            {"steps": "nope"},
            {"steps": [{"action": "deleteEverything", "target": "/"}]},
        ],
    )
    async def test_malformed_output_falls_back(self, document, vite_analysis):
        plan = await PlanProvider(generator=_generator(document)).create_plan(
            "tailwind", vite_analysis
        )
        assert plan.source == PlanSourceKind.STATIC

    @pytest.mark.asyncio
    async def test_empty_steps_fall_back(self, vite_analysis):
        plan = await PlanProvider(generator=_generator({"steps": []})).create_plan(
            "reactQuery", vite_analysis
        )
        assert plan.source == PlanSourceKind.STATIC

    @pytest.mark.asyncio
    async def test_unknown_capability_never_reaches_generator(self, vite_analysis):
        generator = _generator(GENERATED_DOCUMENT)
        with pytest.raises(UnknownCapabilityError):
            await PlanProvider(generator=generator).create_plan("graphql", vite_analysis)
        generator.generate.assert_not_called()

    @pytest.mark.asyncio
    async def test_unsupported_prompt_skipped(self, vite_analysis):
        prompts = MagicMock(spec=PromptBuilder)
        prompts.supports.return_value = False
        generator = _generator(GENERATED_DOCUMENT)
        source = GeneratedPlanSource(generator, prompts)

        assert await source.try_generate("toast", vite_analysis) is None
        generator.generate.assert_not_called()


# ---------------------------------------------------------------------------
# parse_steps
# ---------------------------------------------------------------------------


class TestParseSteps:
    def test_valid(self):
        steps = parse_steps(GENERATED_DOCUMENT)
        assert [s.action for s in steps] == [StepAction.ADD_DEPENDENCY, StepAction.CREATE_FILE]

    def test_aliases(self):
        steps = parse_steps(
            {
                "steps": [
                    {
                        "action": "modifyFile",
                        "target": "src/App.tsx",
                        "searchPattern": "a",
                        "content": "b",
                    }
                ]
            }
        )
        assert steps[0].search_pattern == "a"

    @pytest.mark.parametrize("document", [None, [], {"steps": None}])
    def test_missing_steps(self, document):
        with pytest.raises(ValueError, match="no 'steps' list"):
            parse_steps(document)

    def test_invalid_step(self):
        with pytest.raises(ValueError, match="invalid step"):
            parse_steps({"steps": [{"action": "createFile"}]})

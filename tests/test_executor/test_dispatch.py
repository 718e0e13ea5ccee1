"""Unit tests for CapabilityExecutor dispatch (configurator.executor).

Tests cover:
- Static plans go to the capability's handler
- Generated plans always use the generic interpreter
- Unknown ids fall back to the generic interpreter
- Handler errors propagate
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from configurator.executor import CapabilityExecutor
from configurator.executor.handlers import build_registry
from configurator.models import Plan, PlanSourceKind, PlanStep, StepAction

pytestmark = pytest.mark.unit


def _create_step(target: str, content: str = "x") -> PlanStep:
    return PlanStep(action=StepAction.CREATE_FILE, target=target, content=content)


class TestCapabilityExecutor:
    @pytest.mark.asyncio
    async def test_static_plan_uses_handler(self, react_project: Path, vite_analysis):
        registry = build_registry()
        handler = registry.get("redux")
        handler.execute = AsyncMock()
        plan = handler.plan(vite_analysis)

        await CapabilityExecutor(registry).execute("redux", react_project, plan)
        handler.execute.assert_awaited_once_with(react_project, plan)

    @pytest.mark.asyncio
    async def test_generated_plan_bypasses_handler(self, react_project: Path):
        registry = build_registry()
        handler = registry.get("redux")
        handler.execute = AsyncMock()
        plan = Plan(
            capability="redux",
            steps=[_create_step("src/store/index.ts", "export const store = {}\n")],
            source=PlanSourceKind.GENERATED,
        )

        await CapabilityExecutor(registry).execute("redux", react_project, plan)

        handler.execute.assert_not_called()
        assert (react_project / "src/store/index.ts").read_text() == "export const store = {}\n"

    @pytest.mark.asyncio
    async def test_unknown_capability_runs_generic(self, tmp_path: Path):
        plan = Plan(capability="custom", steps=[_create_step("custom.ts")])
        await CapabilityExecutor().execute("custom", tmp_path, plan)
        assert (tmp_path / "custom.ts").exists()

    @pytest.mark.asyncio
    async def test_handler_errors_propagate(self, make_project, vite_analysis):
        root = make_project(manifest=False)
        registry = build_registry()
        plan = registry.get("toast").plan(vite_analysis)
        with pytest.raises(FileNotFoundError):
            await CapabilityExecutor(registry).execute("toast", root, plan)

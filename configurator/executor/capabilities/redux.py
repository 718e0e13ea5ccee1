"""Redux Toolkit capability."""

from __future__ import annotations

from pathlib import Path

from configurator.executor.capabilities.base import (
    CapabilityHandler,
    copy_assets,
    dependency_step,
    file_step,
)
from configurator.executor.providers import PROVIDERS_FILE, regenerate_providers
from configurator.models import Plan, PlanStep, ProjectAnalysis, StepAction

DEPENDENCIES = {
    "@reduxjs/toolkit": "^2.1.0",
    "react-redux": "^9.1.0",
}


class ReduxHandler(CapabilityHandler):
    capability = "redux"

    def static_steps(self, analysis: ProjectAnalysis) -> list[PlanStep]:
        return [
            dependency_step("Add Redux Toolkit and React-Redux dependencies", DEPENDENCIES),
            file_step(StepAction.CREATE_FILE, "src/store/index.ts", "Create Redux store with configureStore"),
            file_step(
                StepAction.CREATE_FILE,
                "src/store/hooks.ts",
                "Create typed useAppDispatch and useAppSelector hooks",
            ),
            file_step(
                StepAction.CREATE_FILE,
                "src/store/slices/uiSlice.ts",
                "Create UI slice (theme, sidebar, loading)",
            ),
            file_step(
                StepAction.CREATE_FILE,
                "src/store/slices/authSlice.ts",
                "Create auth slice (user, token, login/logout)",
            ),
            file_step(StepAction.MODIFY_FILE, PROVIDERS_FILE, "Add Redux Provider wrapping"),
        ]

    async def execute(self, project_path: str | Path, plan: Plan) -> None:
        await self.add_plan_dependencies(project_path, plan)
        await copy_assets("redux", project_path)
        await regenerate_providers(project_path, self.renderer)

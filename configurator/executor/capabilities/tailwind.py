"""Tailwind CSS capability."""

from __future__ import annotations

from pathlib import Path

from configurator.executor.capabilities.base import (
    CapabilityHandler,
    copy_assets,
    dependency_step,
    file_step,
)
from configurator.models import Plan, PlanStep, ProjectAnalysis, StepAction
from configurator.utils import console

DEV_DEPENDENCIES = {
    "tailwindcss": "^3.4.1",
    "postcss": "^8.4.35",
    "autoprefixer": "^10.4.17",
}
DEPENDENCIES = {
    "clsx": "^2.1.0",
    "tailwind-merge": "^2.2.0",
}

COMPONENTS = ["Button", "Input", "Modal", "Loader", "MainLayout", "NotFoundPage"]


class TailwindHandler(CapabilityHandler):
    """Adds Tailwind configs, directives, the ``cn`` util and Tailwind components."""

    capability = "tailwind"

    def static_steps(self, analysis: ProjectAnalysis) -> list[PlanStep]:
        steps = [
            dependency_step("Add Tailwind CSS dev dependencies", DEV_DEPENDENCIES, dev=True),
            dependency_step("Add clsx and tailwind-merge", DEPENDENCIES),
            file_step(StepAction.CREATE_FILE, "tailwind.config.ts", "Create Tailwind configuration"),
            file_step(StepAction.CREATE_FILE, "postcss.config.js", "Create PostCSS configuration"),
            file_step(StepAction.MODIFY_FILE, "src/index.css", "Replace CSS with Tailwind directives"),
            file_step(
                StepAction.MODIFY_FILE,
                "src/shared/utils/cn.ts",
                "Upgrade cn utility to use clsx + tailwind-merge",
            ),
        ]
        steps.extend(
            file_step(
                StepAction.MODIFY_FILE,
                f"src/shared/components/{name}.tsx",
                "Replace inline styles with Tailwind classes",
            )
            for name in COMPONENTS
        )
        return steps

    async def execute(self, project_path: str | Path, plan: Plan) -> None:
        await self.add_plan_dependencies(project_path, plan)
        written = await copy_assets("tailwind", project_path)
        console.print(f"  [dim]Wrote {len(written)} Tailwind files[/dim]")

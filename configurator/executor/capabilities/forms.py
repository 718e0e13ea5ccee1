"""React Hook Form + Zod capability.

The form components come in two variants. When the project already has a
Tailwind config (typically because the tailwind capability ran first) the
Tailwind-class variant is written, otherwise the inline-style one.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from configurator.executor.capabilities.base import (
    CapabilityHandler,
    copy_assets,
    dependency_step,
    file_step,
)
from configurator.files import append_line_if_missing, first_existing
from configurator.models import Plan, PlanStep, ProjectAnalysis, StepAction
from configurator.utils import console

# zod ships with the base template
DEPENDENCIES = {
    "react-hook-form": "^7.50.1",
    "@hookform/resolvers": "^3.3.4",
}

TAILWIND_MARKERS = ["tailwind.config.ts", "tailwind.config.js"]

BARREL_EXPORTS = [
    ("src/shared/components/index.ts", "FormField", "export { FormField } from './FormField'\n"),
    ("src/shared/hooks/index.ts", "useZodForm", "export { useZodForm } from './useZodForm'\n"),
]


def has_tailwind(project_path: str | Path) -> bool:
    return first_existing(project_path, TAILWIND_MARKERS) is not None


def update_barrels(project_path: str | Path) -> list[str]:
    """Add the FormField/useZodForm re-exports to existing barrel files."""
    root = Path(project_path)
    updated = []
    for relative, marker, line in BARREL_EXPORTS:
        barrel = root / relative
        if barrel.is_file() and append_line_if_missing(barrel, marker, line):
            updated.append(relative)
    return updated


class FormsHandler(CapabilityHandler):
    capability = "forms"

    def static_steps(self, analysis: ProjectAnalysis) -> list[PlanStep]:
        return [
            dependency_step("Add React Hook Form and resolver dependencies", DEPENDENCIES),
            file_step(StepAction.CREATE_FILE, "src/shared/hooks/useZodForm.ts", "Create Zod form hook"),
            file_step(
                StepAction.CREATE_FILE,
                "src/shared/components/FormField.tsx",
                "Create reusable form field component",
            ),
            file_step(
                StepAction.MODIFY_FILE,
                "src/features/auth/components/LoginForm.tsx",
                "Upgrade login form to use RHF + Zod",
            ),
            file_step(
                StepAction.MODIFY_FILE,
                "src/features/auth/types/index.ts",
                "Add Zod schemas to auth types",
            ),
            file_step(StepAction.MODIFY_FILE, "src/shared/components/index.ts", "Re-export FormField"),
            file_step(StepAction.MODIFY_FILE, "src/shared/hooks/index.ts", "Re-export useZodForm"),
        ]

    async def execute(self, project_path: str | Path, plan: Plan) -> None:
        await self.add_plan_dependencies(project_path, plan)
        variant = "tailwind" if has_tailwind(project_path) else "inline"
        console.print(f"  [dim]Using {variant} form components[/dim]")
        await copy_assets("forms/common", project_path)
        await copy_assets(f"forms/{variant}", project_path)
        await asyncio.to_thread(update_barrels, project_path)

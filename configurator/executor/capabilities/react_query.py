"""TanStack React Query capability."""

from __future__ import annotations

import asyncio
from pathlib import Path

from configurator.executor.capabilities.base import (
    CapabilityHandler,
    copy_assets,
    dependency_step,
    file_step,
)
from configurator.executor.providers import PROVIDERS_FILE, regenerate_providers
from configurator.files import append_line_if_missing
from configurator.models import Plan, PlanStep, ProjectAnalysis, StepAction

DEPENDENCIES = {
    "@tanstack/react-query": "^5.24.1",
    "@tanstack/react-query-devtools": "^5.24.1",
}

HOOKS_BARREL = "src/shared/hooks/index.ts"
HOOK_EXPORTS = {
    "useApiQuery": "export { useApiQuery } from './useApiQuery'\n",
    "useApiMutation": "export { useApiMutation } from './useApiMutation'\n",
}


def update_hooks_barrel(project_path: str | Path) -> list[str]:
    """Append the new hook exports to the barrel; a missing barrel is left alone."""
    barrel = Path(project_path) / HOOKS_BARREL
    if not barrel.is_file():
        return []
    return [name for name, line in HOOK_EXPORTS.items() if append_line_if_missing(barrel, name, line)]


class ReactQueryHandler(CapabilityHandler):
    capability = "reactQuery"

    def static_steps(self, analysis: ProjectAnalysis) -> list[PlanStep]:
        return [
            dependency_step("Add React Query dependencies", DEPENDENCIES),
            file_step(
                StepAction.CREATE_FILE,
                "src/services/api/queryClient.ts",
                "Create QueryClient configuration",
            ),
            file_step(
                StepAction.CREATE_FILE,
                "src/shared/hooks/useApiQuery.ts",
                "Create typed query hook using Axios apiClient",
            ),
            file_step(
                StepAction.CREATE_FILE,
                "src/shared/hooks/useApiMutation.ts",
                "Create typed mutation hook using Axios apiClient",
            ),
            file_step(StepAction.MODIFY_FILE, PROVIDERS_FILE, "Add QueryClientProvider wrapping"),
            file_step(StepAction.MODIFY_FILE, HOOKS_BARREL, "Re-export new hooks"),
        ]

    async def execute(self, project_path: str | Path, plan: Plan) -> None:
        await self.add_plan_dependencies(project_path, plan)
        await copy_assets("reactQuery", project_path)
        await asyncio.to_thread(update_hooks_barrel, project_path)
        await regenerate_providers(project_path, self.renderer)

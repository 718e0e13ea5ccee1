"""Sonner toast capability.

The static plan describes the two ``App.tsx`` edits as search/replace steps,
but the handler applies them with guards: the import and the ``<Toaster />``
element are each added only when absent, so running the capability again
leaves ``App.tsx`` as it was. A project without ``src/App.tsx`` is not given
one.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path

from configurator.executor.capabilities.base import (
    CapabilityHandler,
    copy_assets,
    dependency_step,
    file_step,
    read_asset,
)
from configurator.files import read_file, write_file
from configurator.models import Plan, PlanStep, ProjectAnalysis, StepAction

DEPENDENCIES = {"sonner": "^1.4.0"}

APP_FILE = "src/App.tsx"

TOASTER_IMPORT = "import { Toaster } from 'sonner'\n"
APP_CONTAINER = '<div className="app">'
TOASTER_ELEMENT = '\n      <Toaster richColors position="top-right" />'

_IMPORT_LINE = re.compile(r"^import .*", re.MULTILINE)


def add_toaster(content: str) -> str:
    """Return *content* with the Toaster import and element spliced in."""
    if "from 'sonner'" not in content:
        match = _IMPORT_LINE.search(content)
        if match:
            content = content[: match.start()] + TOASTER_IMPORT + content[match.start() :]
        else:
            content = TOASTER_IMPORT + content
    if "<Toaster" not in content:
        content = content.replace(APP_CONTAINER, APP_CONTAINER + TOASTER_ELEMENT, 1)
    return content


def splice_toaster(project_path: str | Path) -> bool:
    """Update ``src/App.tsx`` in place. Returns ``False`` when there is none."""
    app = Path(project_path) / APP_FILE
    if not app.is_file():
        return False
    content = read_file(app)
    updated = add_toaster(content)
    if updated != content:
        write_file(app, updated)
    return True


class ToastHandler(CapabilityHandler):
    capability = "toast"

    def static_steps(self, analysis: ProjectAnalysis) -> list[PlanStep]:
        return [
            dependency_step("Add Sonner dependency", DEPENDENCIES),
            PlanStep(
                action=StepAction.MODIFY_FILE,
                target=APP_FILE,
                description="Add Toaster component import",
                search_pattern="import { Routes",
                content="import { Toaster } from 'sonner'\nimport { Routes",
            ),
            PlanStep(
                action=StepAction.MODIFY_FILE,
                target=APP_FILE,
                description="Add Toaster component to JSX",
                search_pattern=APP_CONTAINER,
                content=APP_CONTAINER + TOASTER_ELEMENT,
            ),
            file_step(
                StepAction.CREATE_FILE,
                "src/hooks/useToast.ts",
                "Create toast utility hook",
                content=read_asset("toast/src/hooks/useToast.ts"),
            ),
        ]

    async def execute(self, project_path: str | Path, plan: Plan) -> None:
        await self.add_plan_dependencies(project_path, plan)
        await asyncio.to_thread(splice_toaster, project_path)
        await copy_assets("toast", project_path)

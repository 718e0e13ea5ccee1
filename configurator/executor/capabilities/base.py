"""Capability handler base classes and asset helpers.

A handler owns two things for one capability: its static plan (the fixed step
list used when no generator is configured or the generator fails) and the
code that applies a plan to a project. File contents written by the
specialised handlers ship as package data under ``configurator/assets/<bundle>/``,
laid out exactly as they land in the target project.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from configurator.executor.steps import execute_generic_plan, execute_step
from configurator.files import write_file
from configurator.models import Plan, PlanSourceKind, PlanStep, ProjectAnalysis, StepAction
from configurator.templates import TemplateRenderer

ASSETS_DIR = Path(__file__).resolve().parents[2] / "assets"


def asset_path(relative: str) -> Path:
    return ASSETS_DIR / relative


def read_asset(relative: str) -> str:
    return asset_path(relative).read_text(encoding="utf-8")


def _copy_bundle(bundle: str, project_path: Path) -> list[str]:
    source = asset_path(bundle)
    if not source.is_dir():
        raise FileNotFoundError(f"Asset bundle not found: {bundle}")
    written: list[str] = []
    for path in sorted(p for p in source.rglob("*") if p.is_file()):
        relative = path.relative_to(source).as_posix()
        write_file(project_path / relative, path.read_text(encoding="utf-8"))
        written.append(relative)
    return written


async def copy_assets(bundle: str, project_path: str | Path) -> list[str]:
    """Write every file of an asset bundle into the project, overwriting.

    Returns the project-relative paths written.
    """
    return await asyncio.to_thread(_copy_bundle, bundle, Path(project_path))


def dependency_step(description: str, dependencies: dict[str, str], dev: bool = False) -> PlanStep:
    return PlanStep(
        action=StepAction.ADD_DEPENDENCY,
        target="package.json",
        description=description,
        dependencies=dict(dependencies),
        is_dev=dev,
    )


def file_step(
    action: StepAction,
    target: str,
    description: str,
    content: str | None = None,
) -> PlanStep:
    return PlanStep(action=action, target=target, description=description, content=content)


class CapabilityHandler:
    """Base class for capability handlers.

    Subclasses set :attr:`capability`, implement :meth:`static_steps` and
    override :meth:`execute` when the capability needs more than the generic
    step interpreter.
    """

    capability: str = ""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def static_steps(self, analysis: ProjectAnalysis) -> list[PlanStep]:
        raise NotImplementedError

    def plan(self, analysis: ProjectAnalysis) -> Plan:
        return Plan(
            capability=self.capability,
            steps=self.static_steps(analysis),
            source=PlanSourceKind.STATIC,
        )

    async def add_plan_dependencies(self, project_path: str | Path, plan: Plan) -> None:
        """Apply only the ``addDependency`` steps of *plan*."""
        for step in plan.steps:
            if step.action == StepAction.ADD_DEPENDENCY:
                await execute_step(project_path, step)

    async def execute(self, project_path: str | Path, plan: Plan) -> None:
        raise NotImplementedError


class GenericHandler(CapabilityHandler):
    """Runs a plan step by step through the generic interpreter."""

    def __init__(
        self,
        capability: str = "",
        steps: list[PlanStep] | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        super().__init__(renderer)
        if capability:
            self.capability = capability
        self._steps = list(steps or [])

    def static_steps(self, analysis: ProjectAnalysis) -> list[PlanStep]:
        return [step.model_copy() for step in self._steps]

    async def execute(self, project_path: str | Path, plan: Plan) -> None:
        await execute_generic_plan(project_path, plan)

"""Generic plan step interpreter.

Runs the four step actions against a project tree. Used for capabilities
without a specialised handler, for the toast capability, and for every
plan produced by the generator.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

from configurator.files import read_file, replace_first, resolve_target, write_file
from configurator.manifest import add_dependencies
from configurator.models import Plan, PlanStep, Position, StepAction
from configurator.utils import console, dump_json


def _add_dependency(root: Path, step: PlanStep) -> None:
    if step.dependencies:
        add_dependencies(root, step.dependencies, dev=step.is_dev)


def _create_file(target: Path, step: PlanStep) -> None:
    if step.content is None:
        console.print(f"  [dim]No content for {step.target}, skipped[/dim]")
        return
    write_file(target, step.content)


def _modify_file(target: Path, step: PlanStep) -> None:
    if step.content is None:
        return
    if not target.exists():
        write_file(target, step.content)
        return

    if step.search_pattern:
        if not replace_first(target, step.search_pattern, step.content):
            console.print(
                f"  [yellow]Pattern not found in {step.target}, left unchanged[/yellow]"
            )
    elif step.position is not None:
        existing = read_file(target)
        if step.position == Position.PREPEND:
            write_file(target, step.content + existing)
        else:
            write_file(target, existing + step.content)
    else:
        write_file(target, step.content)


def _update_config(target: Path, step: PlanStep) -> None:
    if step.content is None:
        return
    if not target.exists():
        write_file(target, step.content)
        return

    try:
        existing = json.loads(read_file(target))
        incoming = json.loads(step.content)
    except ValueError:
        # undecodable bytes or invalid JSON on either side
        write_file(target, step.content)
        return

    if isinstance(existing, dict) and isinstance(incoming, dict):
        write_file(target, dump_json({**existing, **incoming}))
    else:
        write_file(target, step.content)


def apply_step(project_path: str | Path, step: PlanStep) -> None:
    """Apply one step synchronously.

    Raises:
        StepTargetError: If the step target resolves outside the project.
        FileNotFoundError: If an ``addDependency`` step runs without a manifest.
    """
    root = Path(project_path)
    if step.action == StepAction.ADD_DEPENDENCY:
        _add_dependency(root, step)
        return

    target = resolve_target(root, step.target)
    if step.action == StepAction.CREATE_FILE:
        _create_file(target, step)
    elif step.action == StepAction.MODIFY_FILE:
        _modify_file(target, step)
    elif step.action == StepAction.UPDATE_CONFIG:
        _update_config(target, step)


async def execute_step(project_path: str | Path, step: PlanStep) -> None:
    await asyncio.to_thread(apply_step, project_path, step)


async def execute_generic_plan(project_path: str | Path, plan: Plan) -> None:
    """Apply every step of *plan* in order; the first failure propagates."""
    for step in plan.steps:
        console.print(f"  [dim]{step.action.value}[/dim] {step.target}")
        await execute_step(project_path, step)

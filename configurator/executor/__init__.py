"""Capability executor.

Applies a plan to a project. Static plans for capabilities with a specialised
handler go to that handler; everything else, including any plan produced by
the generator, runs through the generic step interpreter.

Usage::

    from configurator.executor import CapabilityExecutor

    executor = CapabilityExecutor()
    await executor.execute("redux", "path/to/project", plan)
"""

from __future__ import annotations

from pathlib import Path

from configurator.executor.handlers import HandlerRegistry, build_registry
from configurator.executor.providers import regenerate_providers
from configurator.executor.steps import apply_step, execute_generic_plan, execute_step
from configurator.models import Plan, PlanSourceKind
from configurator.utils import console


class CapabilityExecutor:
    """Dispatches plans to capability handlers."""

    def __init__(self, handlers: HandlerRegistry | None = None) -> None:
        self.handlers = handlers or build_registry()

    async def execute(self, capability: str, project_path: str | Path, plan: Plan) -> None:
        """Apply *plan* for *capability* to the project at *project_path*.

        Raises whatever the handler raises; the orchestrator records it as a
        per-capability failure.
        """
        if plan.source == PlanSourceKind.GENERATED:
            console.print(f"  [dim]Applying generated plan for {capability}[/dim]")
            await execute_generic_plan(project_path, plan)
            return

        handler = self.handlers.get(capability)
        await handler.execute(project_path, plan)


__all__ = [
    "CapabilityExecutor",
    "HandlerRegistry",
    "apply_step",
    "build_registry",
    "execute_generic_plan",
    "execute_step",
    "regenerate_providers",
]

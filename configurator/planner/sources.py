"""Plan sources, tried in order by the :class:`~configurator.planner.PlanProvider`.

A source returns a step list or ``None`` to hand over to the next source.
:class:`GeneratedPlanSource` asks a :class:`PlanGenerator` for a plan and
returns ``None`` on any failure; :class:`StaticPlanSource` always answers from
the handler table and is the mandatory last link of the chain.
"""

from __future__ import annotations

from typing import Any, Protocol

from pydantic import ValidationError

from configurator.executor.handlers import HandlerRegistry
from configurator.models import PlanSourceKind, PlanStep, ProjectAnalysis
from configurator.planner.prompts import PromptBuilder
from configurator.utils import print_warning


class PlanGenerator(Protocol):
    """Anything that turns prompts into a ``{"steps": [...]}`` document."""

    async def generate(self, system_instruction: str, user_context: str) -> dict[str, Any]: ...


class PlanSource(Protocol):
    kind: PlanSourceKind

    async def try_generate(
        self, capability: str, analysis: ProjectAnalysis
    ) -> list[PlanStep] | None: ...


def parse_steps(document: Any) -> list[PlanStep]:
    """Validate a generator document into plan steps.

    Raises:
        ValueError: If the document has no ``steps`` list or a step is malformed.
    """
    if not isinstance(document, dict) or not isinstance(document.get("steps"), list):
        raise ValueError("Generator output has no 'steps' list")
    try:
        return [PlanStep.model_validate(step) for step in document["steps"]]
    except ValidationError as exc:
        raise ValueError(f"Generator returned an invalid step: {exc}") from exc


class StaticPlanSource:
    """Answers from the fixed step lists carried by the capability handlers."""

    kind = PlanSourceKind.STATIC

    def __init__(self, handlers: HandlerRegistry) -> None:
        self.handlers = handlers

    async def try_generate(
        self, capability: str, analysis: ProjectAnalysis
    ) -> list[PlanStep] | None:
        if not self.handlers.has(capability):
            return None
        return self.handlers.get(capability).plan(analysis).steps


class GeneratedPlanSource:
    """Asks a :class:`PlanGenerator` for the plan.

    Unavailability, exceptions, malformed output and empty step lists all
    yield ``None`` with a console warning, never an error.
    """

    kind = PlanSourceKind.GENERATED

    def __init__(self, generator: PlanGenerator, prompts: PromptBuilder | None = None) -> None:
        self.generator = generator
        self.prompts = prompts or PromptBuilder()

    async def try_generate(
        self, capability: str, analysis: ProjectAnalysis
    ) -> list[PlanStep] | None:
        if not self.prompts.supports(capability):
            return None

        system, user = self.prompts.build(capability, analysis)
        try:
            document = await self.generator.generate(system, user)
            steps = parse_steps(document)
        except Exception as exc:  # noqa: BLE001
            print_warning(f"Plan generation failed for {capability}, using static plan: {exc}")
            return None

        if not steps:
            print_warning(f"Generator returned no steps for {capability}, using static plan")
            return None
        return steps

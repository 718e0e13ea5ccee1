"""Plan provider.

Turns a capability id plus a project analysis into an ordered
:class:`~configurator.models.Plan`. Plans come from a chain of sources: an
optional generator first, then the static table, which always answers for a
registered capability.

Usage::

    from configurator.planner import PlanProvider

    provider = PlanProvider(generator=OllamaPlanGenerator.from_config(config.ollama))
    plan = await provider.create_plan("tailwind", analysis)
"""

from __future__ import annotations

from configurator.executor.handlers import HandlerRegistry, build_registry
from configurator.models import Plan, ProjectAnalysis
from configurator.planner.ollama import OllamaClient, OllamaPlanGenerator, PlanGenerationError
from configurator.planner.prompts import PromptBuilder
from configurator.planner.sources import (
    GeneratedPlanSource,
    PlanGenerator,
    PlanSource,
    StaticPlanSource,
    parse_steps,
)
from configurator.registry import UnknownCapabilityError, is_known


class PlanProvider:
    """Walks its plan sources until one produces steps."""

    def __init__(
        self,
        handlers: HandlerRegistry | None = None,
        generator: PlanGenerator | None = None,
        prompts: PromptBuilder | None = None,
    ) -> None:
        self.handlers = handlers or build_registry()
        self.sources: list[PlanSource] = []
        if generator is not None:
            self.sources.append(GeneratedPlanSource(generator, prompts))
        self.sources.append(StaticPlanSource(self.handlers))

    async def create_plan(self, capability: str, analysis: ProjectAnalysis) -> Plan:
        """Return the plan for *capability*.

        Raises:
            UnknownCapabilityError: If *capability* is not in the registry.
        """
        if not is_known(capability):
            raise UnknownCapabilityError(capability)

        for source in self.sources:
            steps = await source.try_generate(capability, analysis)
            if steps:
                return Plan(capability=capability, steps=steps, source=source.kind)

        # Only reachable when a registry id has no handler registered.
        raise UnknownCapabilityError(capability)


__all__ = [
    "GeneratedPlanSource",
    "OllamaClient",
    "OllamaPlanGenerator",
    "PlanGenerationError",
    "PlanGenerator",
    "PlanProvider",
    "PlanSource",
    "PromptBuilder",
    "StaticPlanSource",
    "parse_steps",
]

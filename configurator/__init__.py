"""React Configurator.

Scaffolds React projects from a template and adds opt-in capabilities
(Tailwind CSS, Redux Toolkit, React Query, React Hook Form + Zod, Sonner
toasts) by inspecting the project, planning, validating and applying file and
manifest mutations.

Usage::

    from configurator import Orchestrator, InjectCapabilitiesOptions

    result = await Orchestrator().inject_capabilities(
        InjectCapabilitiesOptions(project_path="./my-app", capabilities=["tailwind"])
    )
"""

from configurator.config import Config
from configurator.models import (
    Capability,
    CapabilityPreview,
    GenerateProjectOptions,
    GenerateProjectResult,
    InjectCapabilitiesOptions,
    InjectCapabilitiesResult,
    Plan,
    PlanStep,
    ProjectAnalysis,
    ValidationResult,
)
from configurator.orchestrator import Orchestrator
from configurator.registry import CAPABILITIES, UnknownCapabilityError

__version__ = "1.0.0"

__all__ = [
    "CAPABILITIES",
    "Capability",
    "CapabilityPreview",
    "Config",
    "GenerateProjectOptions",
    "GenerateProjectResult",
    "InjectCapabilitiesOptions",
    "InjectCapabilitiesResult",
    "Orchestrator",
    "Plan",
    "PlanStep",
    "ProjectAnalysis",
    "UnknownCapabilityError",
    "ValidationResult",
]

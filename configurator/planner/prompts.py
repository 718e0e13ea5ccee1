"""Generator prompts for each capability.

Every capability has a ``<id>_system.j2`` and ``<id>_user.j2`` template under
``configurator/templates/prompts/``. The user template is rendered from a
small subset of the project analysis chosen per capability.
"""

from __future__ import annotations

from typing import Any, Callable

from configurator.models import ProjectAnalysis
from configurator.templates import TemplateRenderer


def _tailwind_context(analysis: ProjectAnalysis) -> dict[str, Any]:
    return {
        "build_tool": analysis.build_tool.value,
        "global_css_file": f"{analysis.src_directory}/index.css",
        "has_typescript": analysis.has_typescript,
    }


def _source_context(analysis: ProjectAnalysis) -> dict[str, Any]:
    return {
        "has_typescript": analysis.has_typescript,
        "src_directory": analysis.src_directory,
    }


def _toast_context(analysis: ProjectAnalysis) -> dict[str, Any]:
    extension = "tsx" if analysis.has_typescript else "jsx"
    return {
        "app_file": f"{analysis.src_directory}/App.{extension}",
        "has_typescript": analysis.has_typescript,
    }


CONTEXT_BUILDERS: dict[str, Callable[[ProjectAnalysis], dict[str, Any]]] = {
    "tailwind": _tailwind_context,
    "redux": _source_context,
    "reactQuery": _source_context,
    "forms": _source_context,
    "toast": _toast_context,
}


class PromptBuilder:
    """Renders the system instruction and user context for a capability."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def supports(self, capability: str) -> bool:
        return capability in CONTEXT_BUILDERS and self.renderer.has_template(
            f"prompts/{capability}_system.j2"
        )

    def build(self, capability: str, analysis: ProjectAnalysis) -> tuple[str, str]:
        """Return ``(system_instruction, user_context)`` for *capability*.

        Raises:
            KeyError: If the capability has no prompt context.
        """
        context = CONTEXT_BUILDERS[capability](analysis)
        system = self.renderer.render(f"prompts/{capability}_system.j2", {})
        user = self.renderer.render(f"prompts/{capability}_user.j2", context)
        return system, user

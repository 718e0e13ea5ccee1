"""Jinja2 template rendering for generated source files and generator prompts.

Templates live in ``configurator/templates/``: ``providers/`` holds the
whole-file templates the executor writes, ``prompts/`` the per-capability
system and user prompts sent to the plan generator.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from configurator.files import write_file

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateRenderer:
    """Renders the package's ``.j2`` templates.

    ``StrictUndefined`` is used so a prompt or providers template that
    references a missing context key fails loudly instead of rendering blanks.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([], default_for_string=False),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["yesno"] = _yesno_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a template relative to the template directory."""
        template = self.env.get_template(template_path)
        return template.render(**context)

    def has_template(self, template_path: str) -> bool:
        return (self.template_dir / template_path).is_file()

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.
        """
        content = self.render(template_path, context)
        return await asyncio.to_thread(write_file, output_path, content)


def _yesno_filter(value: Any) -> str:
    return "yes" if value else "no"

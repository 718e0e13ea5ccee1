"""Project inspector.

Classifies a target project's entry point, build tool, styling frameworks
and TypeScript usage. Inspection never mutates the project and is recomputed
on every orchestrator call.

Usage::

    from configurator.inspector import analyze_project

    analysis = await analyze_project("path/to/project")
    print(analysis.build_tool, analysis.styling)
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from configurator.inspector.build_tool import detect_build_tool, detect_postcss_config
from configurator.inspector.entry_point import (
    detect_app_file,
    detect_entry_point,
    detect_global_css_file,
)
from configurator.inspector.styling import detect_styling
from configurator.models import ProjectAnalysis


async def analyze_project(project_path: str | Path) -> ProjectAnalysis:
    """Inspect *project_path* and return a fresh :class:`ProjectAnalysis`.

    The entry point, build tool and styling detectors run concurrently.
    Malformed or missing manifests simply contribute no signal.

    Raises:
        FileNotFoundError: If *project_path* does not exist.
        NotADirectoryError: If *project_path* is not a directory.
    """
    root = Path(project_path)
    if not root.exists():
        raise FileNotFoundError(f"Project path does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Project path is not a directory: {root}")

    entry, build, styling = await asyncio.gather(
        detect_entry_point(root),
        detect_build_tool(root),
        detect_styling(root),
    )

    return ProjectAnalysis(
        entry_point=entry.file,
        build_tool=build.tool,
        styling=styling,
        has_typescript=entry.has_typescript,
        src_directory=entry.src_directory,
        config_files=build.config_files,
    )


__all__ = [
    "analyze_project",
    "detect_app_file",
    "detect_build_tool",
    "detect_entry_point",
    "detect_global_css_file",
    "detect_postcss_config",
    "detect_styling",
]

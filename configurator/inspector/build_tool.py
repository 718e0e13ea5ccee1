"""Build tool classification.

Config markers are checked in a fixed priority (vite, next, webpack) and the
first hit wins, so a project carrying both a vite and a webpack config is
classified as vite. Create React App has no config file of its own and is
recognised by ``react-scripts`` in the manifest.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from configurator.files import first_existing
from configurator.manifest import MANIFEST_FILENAME, all_dependencies, read_manifest_safe
from configurator.models import BuildTool

BUILD_TOOL_CONFIGS: list[tuple[BuildTool, list[str]]] = [
    (BuildTool.VITE, ["vite.config.ts", "vite.config.js", "vite.config.mts", "vite.config.mjs"]),
    (BuildTool.NEXT, ["next.config.js", "next.config.ts", "next.config.mjs"]),
    (BuildTool.WEBPACK, ["webpack.config.js", "webpack.config.ts", "config/webpack.config.js"]),
]

POSTCSS_CONFIGS = [
    "postcss.config.js",
    "postcss.config.cjs",
    "postcss.config.mjs",
    ".postcssrc",
    ".postcssrc.json",
]


@dataclass(frozen=True)
class BuildToolInfo:
    tool: BuildTool
    config_files: list[str] = field(default_factory=list)


def classify_build_tool(project_path: str | Path) -> BuildToolInfo:
    for tool, candidates in BUILD_TOOL_CONFIGS:
        found = first_existing(project_path, candidates)
        if found:
            return BuildToolInfo(tool=tool, config_files=[found])

    if "react-scripts" in all_dependencies(read_manifest_safe(project_path)):
        return BuildToolInfo(tool=BuildTool.CRA, config_files=[MANIFEST_FILENAME])

    return BuildToolInfo(tool=BuildTool.UNKNOWN)


async def detect_build_tool(project_path: str | Path) -> BuildToolInfo:
    return await asyncio.to_thread(classify_build_tool, project_path)


async def detect_postcss_config(project_path: str | Path) -> str | None:
    """Return the PostCSS config file, or ``None`` if there is none."""
    return await asyncio.to_thread(first_existing, project_path, POSTCSS_CONFIGS)

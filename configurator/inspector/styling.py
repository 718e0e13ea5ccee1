"""Styling framework detection."""

from __future__ import annotations

import asyncio
from pathlib import Path

from configurator.files import file_contains, find_files, first_existing
from configurator.manifest import all_dependencies, read_manifest_safe

# (tag, packages that imply it), checked in order
PACKAGE_SIGNALS: list[tuple[str, tuple[str, ...]]] = [
    ("tailwind", ("tailwindcss",)),
    ("sass", ("sass", "node-sass")),
    ("styled-components", ("styled-components",)),
    ("emotion", ("@emotion/react", "@emotion/styled")),
]

TAILWIND_CONFIGS = [
    "tailwind.config.js",
    "tailwind.config.ts",
    "tailwind.config.cjs",
    "tailwind.config.mjs",
]

STYLESHEETS = [
    "src/index.css",
    "src/global.css",
    "src/globals.css",
    "app/globals.css",
]


def stylesheet_has_directives(path: Path) -> bool:
    """Unreadable or undecodable stylesheets count as having no directives."""
    try:
        return file_contains(path, "@tailwind")
    except (OSError, UnicodeDecodeError):
        return False


def collect_styling(project_path: str | Path) -> list[str]:
    """Return detected styling tags in detection order, without duplicates."""
    root = Path(project_path)
    frameworks: list[str] = []

    def add(tag: str) -> None:
        if tag not in frameworks:
            frameworks.append(tag)

    deps = all_dependencies(read_manifest_safe(root))
    for tag, packages in PACKAGE_SIGNALS:
        if any(pkg in deps for pkg in packages):
            add(tag)

    if first_existing(root, TAILWIND_CONFIGS):
        add("tailwind")

    # Only the first stylesheet found is inspected.
    stylesheet = first_existing(root, STYLESHEETS)
    if stylesheet and stylesheet_has_directives(root / stylesheet):
        add("tailwind")

    if find_files(root / "src", "*.module.css"):
        add("css-modules")

    return frameworks


async def detect_styling(project_path: str | Path) -> list[str]:
    return await asyncio.to_thread(collect_styling, project_path)

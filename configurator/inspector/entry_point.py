"""Entry point, App component and global stylesheet lookups."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from configurator.files import find_files, first_existing

ENTRY_POINT_PATTERNS = [
    "src/main.tsx",
    "src/main.ts",
    "src/main.jsx",
    "src/main.js",
    "src/index.tsx",
    "src/index.ts",
    "src/index.jsx",
    "src/index.js",
    "app/page.tsx",  # Next.js App Router
    "pages/index.tsx",  # Next.js Pages Router
    "pages/_app.tsx",
]

APP_FILE_PATTERNS = [
    "src/App.tsx",
    "src/App.ts",
    "src/App.jsx",
    "src/App.js",
    "app/layout.tsx",
]

GLOBAL_CSS_PATTERNS = [
    "src/index.css",
    "src/global.css",
    "src/globals.css",
    "src/styles/globals.css",
    "app/globals.css",
    "styles/globals.css",
]

DEFAULT_ENTRY_POINT = "src/main.tsx"


@dataclass(frozen=True)
class EntryPointInfo:
    file: str
    has_typescript: bool
    src_directory: str


def _describe(relative: str) -> EntryPointInfo:
    path = PurePosixPath(relative)
    return EntryPointInfo(
        file=relative,
        has_typescript=path.suffix in (".ts", ".tsx"),
        src_directory=str(path.parent),
    )


def find_entry_point(project_path: str | Path) -> EntryPointInfo:
    """Locate the project's entry file.

    Known locations are tried first in a fixed order, then any ``main.tsx``
    or ``main.jsx`` anywhere in the tree (``node_modules`` excluded), and
    finally ``src/main.tsx`` is assumed.
    """
    root = Path(project_path)
    found = first_existing(root, ENTRY_POINT_PATTERNS)
    if found:
        return _describe(found)

    for filename in ("main.tsx", "main.jsx"):
        matches = find_files(root, filename)
        if matches:
            return _describe(matches[0].relative_to(root).as_posix())

    return _describe(DEFAULT_ENTRY_POINT)


async def detect_entry_point(project_path: str | Path) -> EntryPointInfo:
    return await asyncio.to_thread(find_entry_point, project_path)


async def detect_app_file(project_path: str | Path) -> str | None:
    """Return the App component file, or ``None`` if the project has none."""
    return await asyncio.to_thread(first_existing, project_path, APP_FILE_PATTERNS)


async def detect_global_css_file(project_path: str | Path) -> str | None:
    """Return the global stylesheet, or ``None`` if the project has none."""
    return await asyncio.to_thread(first_existing, project_path, GLOBAL_CSS_PATTERNS)

"""Acquiring the template tree for a new project.

A template is either a local directory, copied without ``node_modules`` and
``.git``, or a remote git repository, shallow-cloned and then detached from
its history by removing ``.git``.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from configurator.utils import console, run_command

REMOTE_PREFIXES = ("http", "git@")
_COPY_IGNORE = shutil.ignore_patterns("node_modules", ".git")
GIT_ENV = {"GIT_TERMINAL_PROMPT": "0"}


class TemplateSourceError(Exception):
    """Raised when a template cannot be copied or cloned."""

    def __init__(self, message: str, command: str = "", stderr: str = ""):
        self.command = command
        self.stderr = stderr
        super().__init__(message)


def is_remote_template(source: str) -> bool:
    return source.startswith(REMOTE_PREFIXES)


async def copy_template(source: str | Path, destination: str | Path) -> Path:
    """Copy a local template directory to *destination*.

    Raises:
        TemplateSourceError: If *source* is missing or *destination* exists.
    """
    src = Path(source)
    dest = Path(destination)
    if not src.is_dir():
        raise TemplateSourceError(f"Template source not found: {src}")
    if dest.exists():
        raise TemplateSourceError(f"Destination already exists: {dest}")

    await asyncio.to_thread(shutil.copytree, src, dest, ignore=_COPY_IGNORE)
    console.print(f"  [dim]Copied template {src} -> {dest}[/dim]")
    return dest


async def clone_repository(url: str, destination: str | Path, timeout: int = 300) -> Path:
    """Shallow-clone *url* into *destination* and strip its ``.git`` directory.

    A failed clone removes whatever was written to *destination*.

    Raises:
        TemplateSourceError: If *destination* exists or the clone fails.
    """
    dest = Path(destination)
    if dest.exists():
        raise TemplateSourceError(f"Destination already exists: {dest}")

    cmd = ["git", "clone", "--depth", "1", url, str(dest)]
    try:
        # fail instead of waiting on a credential prompt
        returncode, _, stderr = await run_command(cmd, timeout=timeout, env=GIT_ENV)
        if returncode != 0:
            raise TemplateSourceError(
                f"git clone failed (exit {returncode}): {url}\n{stderr}",
                command=" ".join(cmd),
                stderr=stderr,
            )
        await asyncio.to_thread(shutil.rmtree, dest / ".git", ignore_errors=True)
    except Exception:
        if dest.exists():
            await asyncio.to_thread(shutil.rmtree, dest, ignore_errors=True)
        raise

    console.print(f"  [dim]Cloned template {url} -> {dest}[/dim]")
    return dest


async def fetch_template(source: str, destination: str | Path, clone_timeout: int = 300) -> Path:
    """Copy or clone *source* depending on whether it looks like a URL."""
    if is_remote_template(source):
        return await clone_repository(source, destination, timeout=clone_timeout)
    return await copy_template(source, destination)

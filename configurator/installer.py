"""Dependency installation in a generated or modified project."""

from __future__ import annotations

from pathlib import Path

from configurator.config import InstallConfig
from configurator.utils import console, run_command


class InstallError(Exception):
    """Raised when the package installer exits non-zero."""

    def __init__(self, message: str, command: str = "", returncode: int = 0):
        self.command = command
        self.returncode = returncode
        super().__init__(message)


class DependencyInstaller:
    """Runs the configured install command (``npm install`` by default)."""

    def __init__(self, config: InstallConfig | None = None) -> None:
        self.config = config or InstallConfig()

    async def install(self, project_path: str | Path) -> None:
        cmd = list(self.config.command)
        cmd_str = " ".join(cmd)
        console.print(f"  [dim]Running {cmd_str} in {project_path}[/dim]")

        returncode, _, stderr = await run_command(
            cmd, cwd=project_path, timeout=self.config.timeout, capture=False
        )
        if returncode != 0:
            detail = f": {stderr}" if stderr else ""
            raise InstallError(
                f"{cmd_str} failed with code {returncode}{detail}",
                command=cmd_str,
                returncode=returncode,
            )

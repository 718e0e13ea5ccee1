"""Shared pytest fixtures for the React Configurator test suite.

Provides reusable fixtures for:
- Temporary React project trees (minimal and template-like)
- A ready-made ProjectAnalysis
- Mock subprocess and httpx helpers
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from configurator.models import BuildTool, ProjectAnalysis


# ---------------------------------------------------------------------------
# Project trees
# ---------------------------------------------------------------------------

APP_TSX = """import { Routes, Route } from 'react-router-dom'
import { HomePage } from '@features/home/components/HomePage'

function App() {
  return (
    <div className="app">
      <Routes>
        <Route path="/" element={<HomePage />} />
      </Routes>
    </div>
  )
}

export default App
"""

MAIN_TSX = """import React from 'react'
import ReactDOM from 'react-dom/client'
import App from './App'
import './index.css'

ReactDOM.createRoot(document.getElementById('root')!).render(<App />)
"""


def _write_tree(root: Path, files: dict[str, str]) -> None:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Factory for throwaway project directories.

    Usage:
        def test_x(make_project):
            root = make_project(
                dependencies={"react": "^18.2.0"},
                files={"vite.config.ts": "export default {}"},
            )
    """
    counter = {"n": 0}

    def factory(
        dependencies: dict[str, str] | None = None,
        dev_dependencies: dict[str, str] | None = None,
        files: dict[str, str] | None = None,
        manifest: dict[str, Any] | None | bool = True,
    ) -> Path:
        counter["n"] += 1
        root = tmp_path / f"project-{counter['n']}"
        root.mkdir()
        if manifest is True:
            data: dict[str, Any] = {"name": "test-app", "version": "0.0.0"}
            if dependencies is not None:
                data["dependencies"] = dependencies
            if dev_dependencies is not None:
                data["devDependencies"] = dev_dependencies
            (root / "package.json").write_text(json.dumps(data, indent=2), encoding="utf-8")
        elif isinstance(manifest, dict):
            (root / "package.json").write_text(json.dumps(manifest, indent=2), encoding="utf-8")
        _write_tree(root, files or {})
        return root

    return factory


@pytest.fixture
def react_project(make_project: Callable[..., Path]) -> Path:
    """A Vite + TypeScript project shaped like the base template."""
    return make_project(
        dependencies={
            "react": "^18.2.0",
            "react-dom": "^18.2.0",
            "react-router-dom": "^6.22.0",
            "zod": "^3.22.4",
        },
        dev_dependencies={"typescript": "^5.3.3", "vite": "^5.1.0"},
        files={
            "vite.config.ts": "export default {}\n",
            "tsconfig.json": "{}\n",
            "index.html": "<div id=\"root\"></div>\n",
            "src/main.tsx": MAIN_TSX,
            "src/App.tsx": APP_TSX,
            "src/index.css": "body { margin: 0; }\n",
            "src/shared/components/index.ts": "export { Button } from './Button'\n",
            "src/shared/hooks/index.ts": "export { useLocalStorage } from './useLocalStorage'\n",
            "src/app/providers/index.tsx": "export function Providers() {}\n",
        },
    )


@pytest.fixture
def vite_analysis() -> ProjectAnalysis:
    return ProjectAnalysis(
        entry_point="src/main.tsx",
        build_tool=BuildTool.VITE,
        styling=[],
        has_typescript=True,
        src_directory="src",
        config_files=["vite.config.ts"],
    )


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory


# ---------------------------------------------------------------------------
# Mock httpx
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_http_client():
    """Factory for a mocked ``httpx.AsyncClient`` context manager.

    Usage:
        def test_x(mock_http_client):
            client = mock_http_client(json_body={"response": "{}"})
            with patch("httpx.AsyncClient", return_value=client):
                ...
    """
    def factory(
        json_body: dict[str, Any] | None = None,
        side_effect: BaseException | None = None,
    ) -> AsyncMock:
        response = MagicMock()
        response.json.return_value = json_body or {}
        response.raise_for_status = MagicMock()

        client = AsyncMock()
        if side_effect is not None:
            client.post = AsyncMock(side_effect=side_effect)
        else:
            client.post = AsyncMock(return_value=response)
        client.__aenter__ = AsyncMock(return_value=client)
        client.__aexit__ = AsyncMock(return_value=False)
        return client

    return factory

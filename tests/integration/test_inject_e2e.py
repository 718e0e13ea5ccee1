"""Integration tests for the template-then-inject pipeline.

These tests run the real orchestrator end-to-end: copy a local template,
apply every built-in capability and verify the resulting project tree. The
installer is replaced with a stub, so no npm or network access is required.
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from configurator.executor.providers import PROVIDERS_FILE
from configurator.models import GenerateProjectOptions, InjectCapabilitiesOptions
from configurator.orchestrator import Orchestrator
from configurator.registry import CAPABILITY_IDS


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _orchestrator() -> Orchestrator:
    installer = MagicMock()
    installer.install = AsyncMock()
    return Orchestrator(installer=installer)


def _snapshot(root: Path) -> dict[str, str]:
    return {
        p.relative_to(root).as_posix(): p.read_text()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


@pytest.mark.integration
class TestFullPipeline:
    @pytest.mark.asyncio
    async def test_generate_with_every_capability(self, react_project: Path, tmp_path: Path):
        output = tmp_path / "full-app"
        result = await _orchestrator().generate_project(
            GenerateProjectOptions(
                project_name="full-app",
                capabilities=list(reversed(CAPABILITY_IDS)),
                output_path=str(output),
                template_path=str(react_project),
            )
        )

        assert result.success, result.errors
        assert result.applied_capabilities == CAPABILITY_IDS

        manifest = json.loads((output / "package.json").read_text())
        deps = manifest["dependencies"]
        for package in (
            "@reduxjs/toolkit",
            "@tanstack/react-query",
            "react-hook-form",
            "sonner",
            "clsx",
        ):
            assert package in deps
        assert list(deps) == sorted(deps)
        assert "tailwindcss" in manifest["devDependencies"]

        providers = (output / PROVIDERS_FILE).read_text()
        assert "<ReduxProvider store={store}>" in providers
        assert "<QueryClientProvider client={queryClient}>" in providers

        # tailwind ran before forms, so the Tailwind form variant was chosen
        form_field = (output / "src/shared/components/FormField.tsx").read_text()
        assert "@shared/utils/cn" in form_field

        app = (output / "src/App.tsx").read_text()
        assert app.count("<Toaster") == 1
        assert "import { Toaster } from 'sonner'" in app

    @pytest.mark.asyncio
    async def test_incremental_injection(self, react_project: Path):
        orchestrator = _orchestrator()

        first = await orchestrator.inject_capabilities(
            InjectCapabilitiesOptions(project_path=str(react_project), capabilities=["reactQuery"])
        )
        second = await orchestrator.inject_capabilities(
            InjectCapabilitiesOptions(project_path=str(react_project), capabilities=["redux"])
        )

        assert first.success and second.success
        providers = (react_project / PROVIDERS_FILE).read_text()
        assert providers.index("<ReduxProvider") < providers.index("<QueryClientProvider")
        assert await orchestrator.detect_installed_capabilities(react_project) == [
            "redux",
            "reactQuery",
        ]

    @pytest.mark.asyncio
    async def test_reinjecting_data_layers_is_stable(self, react_project: Path):
        orchestrator = _orchestrator()
        options = InjectCapabilitiesOptions(
            project_path=str(react_project), capabilities=["redux", "reactQuery", "forms"]
        )

        await orchestrator.inject_capabilities(options)
        before = _snapshot(react_project)
        result = await orchestrator.inject_capabilities(options)

        assert result.success
        assert _snapshot(react_project) == before
        # the second run reports the already-installed packages
        assert any("already installed" in w for w in result.validation.warnings)

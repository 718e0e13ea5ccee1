"""React Configurator orchestrator.

Sequences a run: acquire the project tree, inspect it once, validate the
requested capability set once, apply each capability in registry priority
order, then install dependencies once. Failures inside a run never raise out
of :meth:`Orchestrator.generate_project` or :meth:`Orchestrator.inject_capabilities`;
they are collected into the result's ``errors``.

Usage::

    python -m configurator.orchestrator create my-app --template ./template -c tailwind,redux
    python -m configurator.orchestrator inject ./my-app -c forms
    python -m configurator.orchestrator analyze ./my-app
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from configurator.config import Config
from configurator.executor import CapabilityExecutor
from configurator.executor.handlers import HandlerRegistry, build_registry
from configurator.inspector import analyze_project
from configurator.installer import DependencyInstaller
from configurator.manifest import has_package
from configurator.models import (
    CapabilityPreview,
    GenerateProjectOptions,
    GenerateProjectResult,
    InjectCapabilitiesOptions,
    InjectCapabilitiesResult,
    ProjectAnalysis,
    StepAction,
    ValidationResult,
)
from configurator.planner import OllamaPlanGenerator, PlanProvider
from configurator.registry import CAPABILITIES, CAPABILITY_IDS, get_capability, order_by_priority
from configurator.template_source import fetch_template
from configurator.utils import (
    console,
    print_error,
    print_step_header,
    print_success,
    print_summary_table,
    print_warning,
)
from configurator.validator import ProjectValidator

# Packages whose presence means a capability is already installed.
INSTALLED_MARKERS: dict[str, str] = {
    "redux": "@reduxjs/toolkit",
    "reactQuery": "@tanstack/react-query",
    "forms": "react-hook-form",
    "toast": "sonner",
}


class Orchestrator:
    """Drives project generation and capability injection.

    Every collaborator can be injected; by default they are built from
    *config*. The generator-backed plan source is only wired in when
    ``config.use_generator`` is set.
    """

    def __init__(
        self,
        config: Config | None = None,
        plan_provider: PlanProvider | None = None,
        validator: ProjectValidator | None = None,
        executor: CapabilityExecutor | None = None,
        installer: DependencyInstaller | None = None,
        handlers: HandlerRegistry | None = None,
    ) -> None:
        self.config = config or Config()
        handlers = handlers or build_registry()
        if plan_provider is None:
            generator = (
                OllamaPlanGenerator.from_config(self.config.ollama)
                if self.config.use_generator
                else None
            )
            plan_provider = PlanProvider(handlers=handlers, generator=generator)
        self.plan_provider = plan_provider
        self.validator = validator or ProjectValidator()
        self.executor = executor or CapabilityExecutor(handlers)
        self.installer = installer or DependencyInstaller(self.config.install)

    # ------------------------------------------------------------------
    # Shared steps
    # ------------------------------------------------------------------

    async def _apply_capabilities(
        self,
        project_path: Path,
        capabilities: list[str],
        analysis: ProjectAnalysis,
    ) -> tuple[list[str], list[str]]:
        """Apply capabilities in priority order. Returns ``(applied, errors)``."""
        applied: list[str] = []
        errors: list[str] = []
        for capability in order_by_priority(capabilities):
            console.print(f"[bold cyan]>[/bold cyan] Applying [bold]{capability}[/bold]")
            try:
                plan = await self.plan_provider.create_plan(capability, analysis)
                await self.executor.execute(capability, project_path, plan)
            except Exception as exc:  # noqa: BLE001
                message = f"Failed to apply {capability}: {exc}"
                print_error(f"  {message}")
                errors.append(message)
                continue
            console.print(f"  [green]+[/green] {capability} applied ({plan.source.value} plan)")
            applied.append(capability)
        return applied, errors

    async def _install(self, project_path: Path) -> list[str]:
        try:
            await self.installer.install(project_path)
        except Exception as exc:  # noqa: BLE001
            message = f"Failed to install dependencies: {exc}"
            print_error(f"  {message}")
            return [message]
        return []

    def _report_validation(self, validation: ValidationResult) -> None:
        for warning in validation.warnings:
            print_warning(f"  ! {warning}")
        for error in validation.errors:
            print_error(f"  x {error}")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def generate_project(self, options: GenerateProjectOptions) -> GenerateProjectResult:
        """Create a project from a template and apply capabilities to it."""
        output_path = Path(options.output_path)
        analysis: ProjectAnalysis | None = None
        validation = ValidationResult()
        applied: list[str] = []

        try:
            print_step_header(f"Creating {options.project_name}")
            await fetch_template(
                options.template_path,
                output_path,
                clone_timeout=self.config.install.clone_timeout,
            )
            analysis = await analyze_project(output_path)

            errors: list[str] = []
            if options.capabilities:
                validation = await asyncio.to_thread(
                    self.validator.validate, output_path, options.capabilities
                )
                self._report_validation(validation)
                if not validation.valid:
                    return GenerateProjectResult(
                        success=False,
                        output_path=str(output_path),
                        analysis=analysis,
                        validation=validation,
                        applied_capabilities=[],
                        errors=list(validation.errors),
                    )
                applied, errors = await self._apply_capabilities(
                    output_path, options.capabilities, analysis
                )

            if not options.skip_install:
                errors.extend(await self._install(output_path))
        except Exception as exc:  # noqa: BLE001
            print_error(str(exc))
            return GenerateProjectResult(
                success=False,
                output_path=str(output_path),
                analysis=analysis or ProjectAnalysis.empty(),
                validation=validation,
                applied_capabilities=applied,
                errors=[str(exc)],
            )

        return GenerateProjectResult(
            success=not errors,
            output_path=str(output_path),
            analysis=analysis,
            validation=validation,
            applied_capabilities=applied,
            errors=errors,
        )

    async def inject_capabilities(
        self, options: InjectCapabilitiesOptions
    ) -> InjectCapabilitiesResult:
        """Apply capabilities to an existing project.

        Dependencies are only installed when at least one capability was
        applied.
        """
        project_path = Path(options.project_path)
        analysis: ProjectAnalysis | None = None
        validation = ValidationResult()

        try:
            if not project_path.exists():
                raise FileNotFoundError(f"Project path does not exist: {project_path}")

            analysis = await analyze_project(project_path)

            if options.capabilities:
                validation = await asyncio.to_thread(
                    self.validator.validate, project_path, options.capabilities
                )
                self._report_validation(validation)
                if not validation.valid:
                    return InjectCapabilitiesResult(
                        success=False,
                        analysis=analysis,
                        validation=validation,
                        applied_capabilities=[],
                        errors=list(validation.errors),
                    )

            applied, errors = await self._apply_capabilities(
                project_path, options.capabilities, analysis
            )
            if applied and not options.skip_install:
                errors.extend(await self._install(project_path))
        except Exception as exc:  # noqa: BLE001
            print_error(str(exc))
            return InjectCapabilitiesResult(
                success=False,
                analysis=analysis or ProjectAnalysis.empty(),
                validation=validation,
                applied_capabilities=[],
                errors=[str(exc)],
            )

        return InjectCapabilitiesResult(
            success=not errors,
            analysis=analysis,
            validation=validation,
            applied_capabilities=applied,
            errors=errors,
        )

    async def preview_capabilities(
        self, project_path: str | Path, capabilities: list[str]
    ) -> CapabilityPreview:
        """Summarise what applying *capabilities* would touch, without writing.

        Raises:
            UnknownCapabilityError: For ids not in the registry.
            FileNotFoundError: If *project_path* does not exist.
        """
        analysis = await analyze_project(project_path)
        preview = CapabilityPreview()
        for capability in order_by_priority(capabilities):
            plan = await self.plan_provider.create_plan(capability, analysis)
            for step in plan.steps:
                if step.action == StepAction.CREATE_FILE:
                    bucket = preview.files_to_create
                elif step.action in (StepAction.MODIFY_FILE, StepAction.UPDATE_CONFIG):
                    bucket = preview.files_to_modify
                else:
                    if step.dependencies:
                        target = (
                            preview.dev_dependencies_to_add
                            if step.is_dev
                            else preview.dependencies_to_add
                        )
                        target.update(step.dependencies)
                    continue
                if step.target not in bucket:
                    bucket.append(step.target)
        return preview

    async def detect_installed_capabilities(self, project_path: str | Path) -> list[str]:
        """Return the registry ids that already appear to be installed, in priority order."""
        analysis = await analyze_project(project_path)
        installed = []
        for capability in CAPABILITY_IDS:
            if capability == "tailwind":
                present = "tailwind" in analysis.styling
            else:
                present = has_package(project_path, INSTALLED_MARKERS.get(capability, ""))
            if present:
                installed.append(capability)
        return installed


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _parse_capabilities(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [cap.strip() for cap in raw.split(",") if cap.strip()]


def _print_analysis(analysis: ProjectAnalysis) -> None:
    print_summary_table(
        {
            "Entry point": analysis.entry_point,
            "Build tool": analysis.build_tool.value,
            "TypeScript": "Yes" if analysis.has_typescript else "No",
            "Source directory": analysis.src_directory,
            "Styling": ", ".join(analysis.styling) or "None detected",
            "Config files": ", ".join(analysis.config_files) or "None",
        },
        title="Project Analysis",
    )


def _print_result(result: InjectCapabilitiesResult, success_message: str) -> None:
    if result.success:
        print_success(success_message)
        for cap in result.applied_capabilities:
            console.print(f"  [green]+[/green] {cap}")
    else:
        print_error("Run failed")
        for error in result.errors:
            print_error(f"  - {error}")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``python -m configurator.orchestrator``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="configurator",
        description="Configure React projects with optional capabilities",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  configurator create my-app --template ./template -c tailwind,redux\n"
            "  configurator inject ./my-app -c forms,toast --skip-install\n"
            "  configurator preview ./my-app -c reactQuery\n"
        ),
    )
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Create a new project from a template")
    create.add_argument("project_name")
    create.add_argument("--template", "-t", default=None, help="Local template path or git URL")
    create.add_argument("--capabilities", "-c", default=None, help="Comma-separated capability ids")
    create.add_argument("--skip-install", "-s", action="store_true")

    inject = sub.add_parser("inject", help="Add capabilities to an existing project")
    inject.add_argument("project_path")
    inject.add_argument("--capabilities", "-c", default=None, help="Comma-separated capability ids")
    inject.add_argument("--skip-install", "-s", action="store_true")

    sub.add_parser("list", help="List available capabilities")

    analyze = sub.add_parser("analyze", help="Analyze a project structure")
    analyze.add_argument("project_path")

    preview = sub.add_parser("preview", help="Show what capabilities would change")
    preview.add_argument("project_path")
    preview.add_argument("--capabilities", "-c", required=True, help="Comma-separated capability ids")

    args = parser.parse_args(argv)
    config = Config.from_env()

    if args.command == "list":
        print_summary_table(
            {f"{cap.name} ({cap.value})": cap.description for cap in CAPABILITIES},
            title="Available Capabilities",
        )
        return

    orchestrator = Orchestrator(config)

    if args.command == "analyze":
        try:
            analysis = asyncio.run(analyze_project(Path(args.project_path).resolve()))
        except OSError as exc:
            console.print(f"[bold red]Error:[/bold red] {exc}")
            sys.exit(1)
        _print_analysis(analysis)
        return

    if args.command == "preview":
        requested = _parse_capabilities(args.capabilities)
        try:
            result = asyncio.run(
                orchestrator.preview_capabilities(Path(args.project_path).resolve(), requested)
            )
        except (OSError, ValueError) as exc:
            console.print(f"[bold red]Error:[/bold red] {exc}")
            sys.exit(1)
        # every id is known once the preview succeeded
        names = ", ".join(get_capability(c).name for c in order_by_priority(requested))
        print_summary_table(
            {
                "Files to create": "\n".join(result.files_to_create) or "-",
                "Files to modify": "\n".join(result.files_to_modify) or "-",
                "Dependencies": "\n".join(f"{k}@{v}" for k, v in result.dependencies_to_add.items()) or "-",
                "Dev dependencies": "\n".join(f"{k}@{v}" for k, v in result.dev_dependencies_to_add.items()) or "-",
            },
            title=f"Capability Preview: {names}",
        )
        return

    capabilities = _parse_capabilities(args.capabilities)
    skip_install = args.skip_install or config.skip_install

    if args.command == "create":
        template = args.template or config.template
        if not template:
            console.print(
                "[bold red]Error:[/bold red] No template given. "
                "Pass --template or set CONFIGURATOR_TEMPLATE."
            )
            sys.exit(1)
        output_path = Path.cwd() / args.project_name
        result = asyncio.run(
            orchestrator.generate_project(
                GenerateProjectOptions(
                    project_name=args.project_name,
                    capabilities=capabilities,
                    output_path=str(output_path),
                    template_path=template,
                    skip_install=skip_install,
                )
            )
        )
        _print_result(result, "Project setup complete!")
        if result.success:
            _print_analysis(result.analysis)
            console.print(f"Next steps:\n  cd {args.project_name}\n  npm run dev")
    else:
        if not capabilities:
            print_warning("No capabilities selected.")
            return
        result = asyncio.run(
            orchestrator.inject_capabilities(
                InjectCapabilitiesOptions(
                    project_path=str(Path(args.project_path).resolve()),
                    capabilities=capabilities,
                    skip_install=skip_install,
                )
            )
        )
        _print_result(result, "Configuration complete!")

    if not result.success:
        sys.exit(1)


if __name__ == "__main__":
    main()

"""Pydantic v2 models for the React Configurator.

Defines the request-scoped value objects that flow through the capability
pipeline: the project analysis produced by the inspector, plans and their
steps, validation results, and the options/results of the two orchestrator
entry points.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class BuildTool(str, Enum):
    """Build tooling detected in a project."""
    VITE = "vite"
    WEBPACK = "webpack"
    CRA = "cra"
    NEXT = "next"
    UNKNOWN = "unknown"


class StepAction(str, Enum):
    """Kinds of mutation a plan step can perform."""
    ADD_DEPENDENCY = "addDependency"
    CREATE_FILE = "createFile"
    MODIFY_FILE = "modifyFile"
    UPDATE_CONFIG = "updateConfig"


class Position(str, Enum):
    """Where ``modifyFile`` inserts content when no search pattern is given."""
    PREPEND = "prepend"
    APPEND = "append"


class PlanSourceKind(str, Enum):
    """Which strategy produced a plan."""
    STATIC = "static"
    GENERATED = "generated"


# ---------------------------------------------------------------------------
# Project analysis
# ---------------------------------------------------------------------------

class ProjectAnalysis(BaseModel):
    """Snapshot of a target project, produced fresh by every inspection."""

    model_config = ConfigDict(frozen=True)

    entry_point: str = Field(..., description="Entry file relative to the project root")
    build_tool: BuildTool = Field(default=BuildTool.UNKNOWN)
    styling: list[str] = Field(
        default_factory=list, description="Detected styling tags in detection order"
    )
    has_typescript: bool = Field(default=False)
    src_directory: str = Field(default="src")
    config_files: list[str] = Field(
        default_factory=list, description="Config files found during build-tool detection"
    )

    @classmethod
    def empty(cls) -> "ProjectAnalysis":
        """Placeholder returned when a run fails before the project could be inspected."""
        return cls(entry_point="", build_tool=BuildTool.UNKNOWN, src_directory="src")


# ---------------------------------------------------------------------------
# Plans
# ---------------------------------------------------------------------------

class PlanStep(BaseModel):
    """One atomic file or manifest mutation.

    Accepts both snake_case and the camelCase names used on the wire by plan
    generators (``isDev``, ``searchPattern``).
    """

    model_config = ConfigDict(populate_by_name=True)

    action: StepAction
    target: str = Field(..., min_length=1, description="Path or manifest key")
    description: str = Field(default="")
    content: Optional[str] = Field(default=None)
    dependencies: Optional[dict[str, str]] = Field(default=None)
    is_dev: bool = Field(default=False, alias="isDev")
    search_pattern: Optional[str] = Field(default=None, alias="searchPattern")
    position: Optional[Position] = Field(default=None)


class Plan(BaseModel):
    """Ordered steps implementing one capability."""

    capability: str
    steps: list[PlanStep] = Field(default_factory=list)
    source: PlanSourceKind = Field(default=PlanSourceKind.STATIC)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class ValidationResult(BaseModel):
    """Outcome of the pre-flight checks. ``valid`` is true iff ``errors`` is empty."""

    valid: bool = True
    warnings: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    @classmethod
    def from_messages(cls, warnings: list[str], errors: list[str]) -> "ValidationResult":
        return cls(valid=not errors, warnings=list(warnings), errors=list(errors))


# ---------------------------------------------------------------------------
# Capability catalogue
# ---------------------------------------------------------------------------

class Capability(BaseModel):
    """A registry entry. Only ``value`` is used programmatically."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    description: str


# ---------------------------------------------------------------------------
# Orchestrator requests and results
# ---------------------------------------------------------------------------

class GenerateProjectOptions(BaseModel):
    """Options for creating a project from a template."""
    project_name: str = Field(..., min_length=1)
    capabilities: list[str] = Field(default_factory=list)
    output_path: str = Field(..., description="Destination directory (must not exist)")
    template_path: str = Field(..., description="Local template directory or git URL")
    skip_install: bool = False


class InjectCapabilitiesOptions(BaseModel):
    """Options for adding capabilities to an existing project."""
    project_path: str
    capabilities: list[str] = Field(default_factory=list)
    skip_install: bool = False


class InjectCapabilitiesResult(BaseModel):
    """Result of an orchestrator run.

    Always carries the analysis and validation, even on failure, so callers
    can present partial diagnostics.
    """
    success: bool
    analysis: ProjectAnalysis
    validation: ValidationResult
    applied_capabilities: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)


class GenerateProjectResult(InjectCapabilitiesResult):
    """Result of :meth:`Orchestrator.generate_project`."""
    output_path: str


class CapabilityPreview(BaseModel):
    """What applying a set of capabilities would touch."""
    files_to_create: list[str] = Field(default_factory=list)
    files_to_modify: list[str] = Field(default_factory=list)
    dependencies_to_add: dict[str, str] = Field(default_factory=dict)
    dev_dependencies_to_add: dict[str, str] = Field(default_factory=dict)

"""Pre-flight validation of a capability set against a project.

Read-only. Duplicates, version floors and missing optional configs are
warnings; only hard conflicts between requested capabilities are errors and
make the result invalid.

Usage::

    from configurator.validator import ProjectValidator

    result = ProjectValidator().validate("path/to/project", ["tailwind", "redux"])
    if not result.valid:
        print(result.errors)
"""

from __future__ import annotations

from pathlib import Path

from configurator.models import ValidationResult
from configurator.validator.conflicts import (
    CAPABILITY_CONFLICTS,
    REACT_REQUIREMENTS,
    ConflictRule,
    check_conflicts,
    parse_version,
)
from configurator.validator.duplicates import CAPABILITY_INDICATORS, Indicators, check_duplicates


class ProjectValidator:
    """Runs the duplicate and conflict checks.

    All three tables can be replaced per instance; the defaults are the
    module-level tables.
    """

    def __init__(
        self,
        indicators: dict[str, Indicators] | None = None,
        conflicts: dict[str, ConflictRule] | None = None,
        requirements: dict[str, str] | None = None,
    ) -> None:
        self.indicators = CAPABILITY_INDICATORS if indicators is None else indicators
        self.conflicts = CAPABILITY_CONFLICTS if conflicts is None else conflicts
        self.requirements = REACT_REQUIREMENTS if requirements is None else requirements

    def validate(self, project_path: str | Path, capabilities: list[str]) -> ValidationResult:
        warnings = check_duplicates(project_path, capabilities, self.indicators)
        conflict_warnings, errors = check_conflicts(
            project_path, capabilities, self.conflicts, self.requirements
        )
        warnings.extend(conflict_warnings)
        return ValidationResult.from_messages(warnings, errors)


__all__ = [
    "ConflictRule",
    "Indicators",
    "ProjectValidator",
    "check_conflicts",
    "check_duplicates",
    "parse_version",
]

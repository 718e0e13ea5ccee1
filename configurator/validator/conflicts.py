"""Conflict and environment checks.

The pairwise conflict table ships empty: no two built-in capabilities are
incompatible today. The scan still runs over every pair so a table passed
in by the caller takes effect.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from itertools import combinations
from pathlib import Path

from configurator.files import first_existing
from configurator.manifest import get_package_version


@dataclass(frozen=True)
class ConflictRule:
    hard: list[str] = field(default_factory=list)
    soft: list[str] = field(default_factory=list)


CAPABILITY_CONFLICTS: dict[str, ConflictRule] = {
    "tailwind": ConflictRule(),
    "redux": ConflictRule(),
    "reactQuery": ConflictRule(),
    "forms": ConflictRule(),
    "toast": ConflictRule(),
}

# Minimum React version per capability.
REACT_REQUIREMENTS: dict[str, str] = {
    "tailwind": "16.0.0",
    "redux": "18.0.0",
    "forms": "16.8.0",
    "reactQuery": "18.0.0",
    "toast": "18.0.0",
}

TSCONFIG = "tsconfig.json"
BUILD_CONFIGS = ["vite.config.ts", "vite.config.js", "next.config.js", "next.config.ts"]

_VERSION_RE = re.compile(r"(\d+)(?:\.(\d+))?(?:\.(\d+))?")


def parse_version(version_range: str) -> tuple[int, int, int] | None:
    """Extract the first ``major[.minor[.patch]]`` from a version range.

    ``"^18.2.0"`` -> ``(18, 2, 0)``, ``"~17"`` -> ``(17, 0, 0)``. Ranges with
    no number in them (``"latest"``, ``"*"``) return ``None``.
    """
    match = _VERSION_RE.search(version_range)
    if not match:
        return None
    return tuple(int(part or 0) for part in match.groups())  # type: ignore[return-value]


def _pair_conflicts(
    capabilities: list[str], table: dict[str, ConflictRule]
) -> tuple[list[str], list[str]]:
    warnings: list[str] = []
    errors: list[str] = []
    empty = ConflictRule()
    for first, second in combinations(capabilities, 2):
        a = table.get(first, empty)
        b = table.get(second, empty)
        if second in a.hard or first in b.hard:
            errors.append(
                f"'{first}' and '{second}' have a hard conflict and cannot be used together."
            )
        if second in a.soft or first in b.soft:
            warnings.append(
                f"'{first}' and '{second}' may have compatibility issues when used together."
            )
    return warnings, errors


def _react_version_warnings(
    project_path: Path, capabilities: list[str], requirements: dict[str, str]
) -> list[str]:
    react = get_package_version(project_path, "react")
    if not react:
        return []
    installed = parse_version(react)
    if installed is None:
        return []

    warnings = []
    for capability in capabilities:
        floor = requirements.get(capability)
        if floor and installed < (parse_version(floor) or (0, 0, 0)):
            warnings.append(
                f"'{capability}' requires React >={floor}. You have React {react}."
            )
    return warnings


def check_conflicts(
    project_path: str | Path,
    capabilities: list[str],
    conflicts: dict[str, ConflictRule] | None = None,
    requirements: dict[str, str] | None = None,
) -> tuple[list[str], list[str]]:
    """Return ``(warnings, errors)`` for the requested capability set.

    Only hard conflicts produce errors. Version floors, a missing
    ``tsconfig.json`` and a missing vite/next config are warnings.
    """
    root = Path(project_path)
    warnings, errors = _pair_conflicts(
        capabilities, CAPABILITY_CONFLICTS if conflicts is None else conflicts
    )
    warnings.extend(
        _react_version_warnings(
            root, capabilities, REACT_REQUIREMENTS if requirements is None else requirements
        )
    )

    if not (root / TSCONFIG).exists():
        warnings.append("No tsconfig.json found. Type definitions may not work correctly.")

    if first_existing(root, BUILD_CONFIGS) is None:
        warnings.append(
            "No Vite or Next.js config found. Some features may require manual configuration."
        )

    return warnings, errors

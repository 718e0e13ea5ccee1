"""Duplicate installation check.

Each capability has indicator packages and config files. Finding the
capability's preferred package means it is already installed; finding one of
the other indicator packages means a competing library fills the same role.
Both are warnings, never errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from configurator.manifest import all_dependencies, read_manifest_safe


@dataclass(frozen=True)
class Indicators:
    preferred: str
    role: str
    label: str
    packages: list[str] = field(default_factory=list)
    files: list[str] = field(default_factory=list)


CAPABILITY_INDICATORS: dict[str, Indicators] = {
    "tailwind": Indicators(
        preferred="tailwindcss",
        role="CSS framework",
        label="Tailwind CSS",
        packages=["tailwindcss"],
        files=["tailwind.config.js", "tailwind.config.ts", "tailwind.config.cjs"],
    ),
    "redux": Indicators(
        preferred="@reduxjs/toolkit",
        role="state management",
        label="Redux Toolkit",
        packages=["@reduxjs/toolkit", "redux", "mobx", "zustand", "jotai", "recoil"],
    ),
    "reactQuery": Indicators(
        preferred="@tanstack/react-query",
        role="data fetching",
        label="React Query",
        packages=["@tanstack/react-query", "react-query", "swr"],
    ),
    "forms": Indicators(
        preferred="react-hook-form",
        role="form",
        label="React Hook Form",
        packages=["react-hook-form", "formik"],
    ),
    "toast": Indicators(
        preferred="sonner",
        role="toast",
        label="Sonner",
        packages=["sonner", "react-toastify", "react-hot-toast", "notistack"],
    ),
}


def check_duplicates(
    project_path: str | Path,
    capabilities: list[str],
    indicators: dict[str, Indicators] | None = None,
) -> list[str]:
    """Return duplicate/alternative warnings for *capabilities*.

    A missing or malformed manifest counts as having no dependencies.
    """
    table = CAPABILITY_INDICATORS if indicators is None else indicators
    root = Path(project_path)
    deps = all_dependencies(read_manifest_safe(root))
    warnings: list[str] = []

    for capability in capabilities:
        entry = table.get(capability)
        if entry is None:
            continue

        for pkg in entry.packages:
            if pkg not in deps:
                continue
            if pkg == entry.preferred:
                warnings.append(f"'{pkg}' is already installed. Skipping duplicate installation.")
            else:
                warnings.append(
                    f"Found existing {entry.role} library '{pkg}'. "
                    f"Adding {entry.label} may cause conflicts."
                )

        for filename in entry.files:
            if (root / filename).exists():
                warnings.append(
                    f"'{filename}' already exists. Existing configuration may be overwritten."
                )

    return warnings

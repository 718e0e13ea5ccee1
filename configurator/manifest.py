"""Reading and mutating a project's ``package.json``.

Dependency insertion is a flat key merge: a colliding key takes the new version
string and the section is re-sorted before it is written back, so the output
is the same whatever order dependencies were added in.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from configurator.files import write_file
from configurator.utils import dump_json, load_json, try_load_json

MANIFEST_FILENAME = "package.json"


def manifest_path(project_path: str | Path) -> Path:
    return Path(project_path) / MANIFEST_FILENAME


def read_manifest(project_path: str | Path) -> dict[str, Any]:
    """Load the manifest, raising if it is missing or malformed."""
    return load_json(manifest_path(project_path))


def read_manifest_safe(project_path: str | Path) -> dict[str, Any] | None:
    """Load the manifest, returning ``None`` if it is missing or malformed."""
    return try_load_json(manifest_path(project_path))


def write_manifest(project_path: str | Path, manifest: dict[str, Any]) -> Path:
    return write_file(manifest_path(project_path), dump_json(manifest))


def _section(manifest: dict[str, Any], key: str) -> dict[str, str]:
    value = manifest.get(key)
    return value if isinstance(value, dict) else {}


def all_dependencies(manifest: dict[str, Any] | None) -> dict[str, str]:
    """Merge ``dependencies`` and ``devDependencies`` (dev entries win on collision)."""
    if not manifest:
        return {}
    return {**_section(manifest, "dependencies"), **_section(manifest, "devDependencies")}


def add_dependencies(
    project_path: str | Path,
    dependencies: dict[str, str],
    dev: bool = False,
) -> dict[str, str]:
    """Merge *dependencies* into the manifest and write it back.

    Args:
        project_path: Project root containing ``package.json``.
        dependencies: ``{package: version range}`` to insert.
        dev: Target ``devDependencies`` instead of ``dependencies``.

    Returns:
        The resulting (sorted) section.

    Raises:
        FileNotFoundError: If the project has no manifest.
    """
    manifest = read_manifest(project_path)
    key = "devDependencies" if dev else "dependencies"
    merged = {**_section(manifest, key), **dependencies}
    manifest[key] = dict(sorted(merged.items()))
    write_manifest(project_path, manifest)
    return manifest[key]


def get_package_version(project_path: str | Path, package: str) -> str | None:
    """Return the declared version range of *package*, if any. Never raises."""
    return all_dependencies(read_manifest_safe(project_path)).get(package)


def has_package(project_path: str | Path, package: str) -> bool:
    return get_package_version(project_path, package) is not None

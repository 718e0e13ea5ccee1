"""Filesystem helpers shared by the inspector and the executor."""

from __future__ import annotations

from pathlib import Path

IGNORED_DIRECTORIES = frozenset({"node_modules", ".git"})


class StepTargetError(ValueError):
    """Raised when a plan step points outside the project root."""


def resolve_target(project_path: str | Path, target: str) -> Path:
    """Resolve *target* relative to the project root, refusing to escape it."""
    root = Path(project_path).resolve()
    candidate = (root / target).resolve()
    if candidate != root and root not in candidate.parents:
        raise StepTargetError(f"Step target escapes the project root: {target}")
    return candidate


def read_file(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def write_file(path: str | Path, content: str) -> Path:
    """Write *content*, creating parent directories. Overwrites unconditionally."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(content, encoding="utf-8")
    return out


def replace_first(path: str | Path, search: str, replacement: str) -> bool:
    """Replace the first literal occurrence of *search* in the file.

    Returns ``True`` if a match was replaced. The file is left untouched when
    the pattern does not occur.
    """
    content = read_file(path)
    if search not in content:
        return False
    write_file(path, content.replace(search, replacement, 1))
    return True


def append_line_if_missing(path: str | Path, marker: str, line: str) -> bool:
    """Append *line* to the file unless *marker* already occurs in it."""
    content = read_file(path)
    if marker in content:
        return False
    if content and not content.endswith("\n"):
        content += "\n"
    write_file(path, content + line)
    return True


def file_contains(path: str | Path, needle: str) -> bool:
    return needle in read_file(path)


def first_existing(root: str | Path, candidates: list[str]) -> str | None:
    """Return the first candidate (relative path) that exists under *root*."""
    base = Path(root)
    for candidate in candidates:
        if (base / candidate).exists():
            return candidate
    return None


def find_files(root: str | Path, filename_pattern: str) -> list[Path]:
    """Recursively find files matching *filename_pattern* under *root*.

    ``node_modules`` and ``.git`` are skipped. Results are sorted so callers
    that take the first match are deterministic.
    """
    base = Path(root)
    if not base.is_dir():
        return []
    matches = [
        p
        for p in base.rglob(filename_pattern)
        if p.is_file() and not IGNORED_DIRECTORIES.intersection(p.relative_to(base).parts)
    ]
    return sorted(matches)

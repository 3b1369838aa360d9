"""Persistent project storage: one JSON file per project.

Layout: ``<folder>/<project name>.pman`` holding
``{name, description, active_tasks, completed_tasks}``.
"""

from __future__ import annotations

import json
from pathlib import Path

from .config import PROJECT_FILE_EXTENSION
from .models import Project


class StorageError(Exception):
    """A project file could not be read, written, renamed or removed."""


def project_path(folder: Path, name: str) -> Path:
    """Return the file path backing the project called ``name``."""
    return folder / f"{name}.{PROJECT_FILE_EXTENSION}"


def load_project(path: Path) -> Project:
    """Load one project file."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        return Project.from_dict(raw)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors too.
        raise StorageError(str(e)) from e


def save_project(project: Project, path: Path) -> None:
    """Serialize ``project`` to ``path``, replacing any previous content."""
    try:
        path.write_text(json.dumps(project.to_dict(), indent=2), encoding="utf-8")
    except OSError as e:
        raise StorageError(str(e)) from e


def list_projects(folder: Path) -> list[Project]:
    """Load every project in ``folder``, sorted by name.

    Files that cannot be read or parsed are skipped.
    """
    try:
        candidates = sorted(folder.glob(f"*.{PROJECT_FILE_EXTENSION}"))
    except OSError:
        return []

    projects: list[Project] = []
    for path in candidates:
        if not path.is_file():
            continue
        try:
            projects.append(load_project(path))
        except StorageError:
            continue
    projects.sort(key=lambda p: p.name)
    return projects


def delete_project(folder: Path, name: str) -> None:
    try:
        project_path(folder, name).unlink()
    except OSError as e:
        raise StorageError(str(e)) from e


def rename_project(folder: Path, old_name: str, new_name: str) -> Path:
    """Move the file of ``old_name`` to the path for ``new_name``.

    Never overwrites another project's file. Returns the new path.
    """
    src = project_path(folder, old_name)
    dst = project_path(folder, new_name)
    if dst.exists() and dst != src:
        raise StorageError(f"Project already exists: {new_name}")
    try:
        src.rename(dst)
    except OSError as e:
        raise StorageError(str(e)) from e
    return dst

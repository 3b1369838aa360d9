"""Shared test helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pman.events import KeyPress
from pman.models import Project, Task
from pman.router import Frame
from pman.storage import project_path, save_project


def press(target: Any, *keys: str) -> list[bool]:
    """Send key names to a view or router; return what each call reported."""
    handler = getattr(target, "handle_key", None) or target.handle
    return [handler(KeyPress.of(key)) for key in keys]


def type_text(target: Any, text: str) -> None:
    press(target, *("space" if ch == " " else ch for ch in text))


def make_project(
    folder: Path,
    name: str,
    active: tuple[str, ...] = (),
    completed: tuple[str, ...] = (),
    description: str = "",
) -> Project:
    project = Project(
        name=name,
        description=description,
        active_tasks=[Task(name=n) for n in active],
        completed_tasks=[Task(name=n) for n in completed],
    )
    save_project(project, project_path(folder, name))
    return project


class RecordingSurface:
    def __init__(self) -> None:
        self.frames: list[Frame] = []

    def paint(self, frame: Frame) -> None:
        self.frames.append(frame)

    @property
    def last(self) -> Frame:
        return self.frames[-1]

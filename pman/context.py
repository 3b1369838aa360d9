"""Cross-view record used to hand selection state between views."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from pathlib import Path

from .models import Project, Task


@dataclass
class SharedContext:
    """Written by a view losing focus, read by the view gaining it.

    ``project`` and ``task`` hold copies, never a view's live objects.
    """

    folder: Path
    project: Project | None = None
    task: Task | None = None

    def publish_project(self, project: Project | None) -> None:
        self.project = copy.deepcopy(project)

    def publish_task(self, task: Task | None) -> None:
        self.task = copy.deepcopy(task)

"""Project list view: browse, add, rename, describe and delete projects."""

from __future__ import annotations

import copy
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from rich.console import Group, RenderableType
from rich.table import Table

from ..context import SharedContext
from ..events import KeyPress
from ..logs import log
from ..models import Project
from ..popups import ChoicePopup, InputPopup
from ..selection import SelectableList
from ..settings import SETTINGS
from ..storage import (
    StorageError,
    delete_project,
    list_projects,
    project_path,
    rename_project,
    save_project,
)
from .base import InputRejected, View
from .render import list_panel, text_panel


class ProjectAction(Enum):
    ADD = "add"
    DESCRIBE = "describe"
    RENAME = "rename"
    DELETE = "delete"


class ProjectView(View):
    """Projects on the left, the selected project's tasks on the right.

    ``detail_factory`` builds the view opened by Enter; it receives the
    working folder and is driven in DELEGATED mode until Escape.
    """

    title = "Projects"

    def __init__(
        self,
        folder: Path,
        detail_factory: Callable[[Path], View] | None = None,
    ) -> None:
        super().__init__(folder)
        self.projects: SelectableList[Project] = SelectableList()
        self.detail_factory = detail_factory

    @property
    def selected(self) -> Project | None:
        return self.projects.selected

    def reload(self, select_name: str | None = None) -> None:
        """Re-read the folder, keeping the selection by name where possible."""
        if select_name is None and self.selected is not None:
            select_name = self.selected.name
        self.projects.replace(list_projects(self.folder))
        if select_name is not None:
            self.projects.select_first(lambda p: p.name == select_name)

    # ── Focus ─────────────────────────────────────────────────────────

    def on_focus_gained(self, context: SharedContext) -> None:
        self.clear_popups()
        self.reload(context.project.name if context.project else None)

    def on_focus_lost(self, context: SharedContext) -> None:
        if self.child is not None:
            self.close_child()
        selected = self.selected
        previous = context.project.name if context.project else None
        if selected is None or selected.name != previous:
            context.publish_task(None)
        context.publish_project(selected)

    def on_child_closed(self, context: SharedContext) -> None:
        self.reload(context.project.name if context.project else None)

    # ── Commands ──────────────────────────────────────────────────────

    def handle_command(self, key: KeyPress) -> bool:
        project = self.selected
        if key.key == "up":
            self.projects.previous()
        elif key.key == "down":
            self.projects.next()
        elif key.key == "a":
            self.open_popup(InputPopup("Insert project name"), ProjectAction.ADD)
        elif key.key == "enter" and self.detail_factory is not None:
            if project is not None:
                context = SharedContext(self.folder)
                context.publish_project(project)
                self.open_child(self.detail_factory(self.folder), context)
        elif key.key not in ("d", "e", "n"):
            return False
        elif project is None:
            pass
        elif key.key == "d":
            self.open_popup(
                ChoicePopup(f"Delete project: {project.name}"),
                ProjectAction.DELETE,
            )
        elif key.key == "e":
            self.open_popup(
                InputPopup("Edit project description", project.description),
                ProjectAction.DESCRIBE,
            )
        else:
            self.open_popup(
                InputPopup("Edit project name", project.name),
                ProjectAction.RENAME,
            )
        return True

    def submit(self, purpose: Enum, value: str) -> None:
        if purpose is ProjectAction.ADD:
            self._add(value)
        elif purpose is ProjectAction.DESCRIBE:
            self._describe(value)
        elif purpose is ProjectAction.RENAME:
            self._rename(value)

    def confirm(self, purpose: Enum) -> None:
        if purpose is ProjectAction.DELETE and self.selected is not None:
            name = self.selected.name
            try:
                delete_project(self.folder, name)
                log(f"project deleted: {name}")
            finally:
                self.reload()

    def _validate_name(self, value: str, current: str | None = None) -> str:
        name = value.strip()
        if not name:
            raise InputRejected("Project name cannot be empty")
        if "/" in name or "\\" in name or name in (".", ".."):
            raise InputRejected("Project name cannot contain path separators")
        if name != current and (
            any(p.name == name for p in self.projects)
            or project_path(self.folder, name).exists()
        ):
            raise InputRejected(f"Project already exists: {name}")
        return name

    def _add(self, value: str) -> None:
        name = self._validate_name(value)
        project = Project(name=name, description=SETTINGS.project_description)
        save_project(project, project_path(self.folder, name))
        log(f"project added: {name}")
        self.reload(select_name=name)

    def _describe(self, value: str) -> None:
        if self.selected is None:
            return
        project = copy.deepcopy(self.selected)
        project.description = value
        save_project(project, project_path(self.folder, project.name))
        self.reload()

    def _rename(self, value: str) -> None:
        if self.selected is None:
            return
        old_name = self.selected.name
        new_name = self._validate_name(value, current=old_name)
        if new_name == old_name:
            return

        new_path = rename_project(self.folder, old_name, new_name)
        project = copy.deepcopy(self.selected)
        project.name = new_name
        try:
            save_project(project, new_path)
        except StorageError as e:
            try:
                rename_project(self.folder, new_name, old_name)
            except StorageError as rollback:
                log(f"rename rollback failed: {new_name} -> {old_name}: {rollback}")
                self.reload()
                raise StorageError(f"{e} (rollback failed: {rollback})") from e
            log(f"rename rolled back: {new_name} -> {old_name}")
            raise
        log(f"project renamed: {old_name} -> {new_name}")
        self.reload(select_name=new_name)

    # ── Rendering ─────────────────────────────────────────────────────

    def render_body(self) -> RenderableType:
        project = self.selected
        left = Group(
            list_panel(
                "Projects",
                (p.name for p in self.projects),
                self.projects.index,
                empty="No projects yet. Press A to add one.",
            ),
            text_panel("Description", project.description if project else ""),
        )
        right = Group(
            list_panel(
                "Active tasks",
                (t.name for t in project.active_tasks) if project else (),
                None,
                focused=False,
            ),
            list_panel(
                "Completed tasks",
                (t.name for t in project.completed_tasks) if project else (),
                None,
                focused=False,
            ),
        )
        grid = Table.grid(expand=True)
        grid.add_column(ratio=1)
        grid.add_column(ratio=1)
        grid.add_row(left, right)
        return grid

    def commands_description(self) -> str:
        keys = [
            "Q: Quit",
            "A: Add project",
            "D: Delete project",
            "E: Edit project description",
            "N: Edit project name",
        ]
        if self.detail_factory is not None:
            keys.append("Enter: Open tasks")
        keys.append("Tab: Go to tasks")
        return " | ".join(keys)

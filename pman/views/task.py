"""Task view: active and completed tasks of one project."""

from __future__ import annotations

import copy
from enum import Enum
from pathlib import Path

from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from ..context import SharedContext
from ..events import KeyPress
from ..logs import log
from ..models import Project, Task
from ..popups import ChoicePopup, InputPopup
from ..selection import SelectableList
from ..settings import SETTINGS
from ..storage import StorageError, load_project, project_path, save_project
from .base import InputRejected, View
from .render import MUTED, list_panel, text_panel

NO_PROJECT = "No project selected"


class TaskAction(Enum):
    ADD = "add"
    DESCRIBE = "describe"
    RENAME = "rename"
    DELETE = "delete"


class TaskView(View):
    title = "Tasks"

    def __init__(self, folder: Path) -> None:
        super().__init__(folder)
        self.project: Project | None = None
        self.active: SelectableList[Task] = SelectableList()
        self.completed: SelectableList[Task] = SelectableList()
        self.focus_active = True

    @property
    def path(self) -> Path | None:
        if self.project is None:
            return None
        return project_path(self.folder, self.project.name)

    @property
    def focused_list(self) -> SelectableList[Task]:
        return self.active if self.focus_active else self.completed

    @property
    def selected_task(self) -> Task | None:
        return self.focused_list.selected

    def _sync(self) -> None:
        if self.project is None:
            self.active.replace(())
            self.completed.replace(())
        else:
            self.active.replace(self.project.active_tasks)
            self.completed.replace(self.project.completed_tasks)

    def _commit(self, candidate: Project) -> None:
        """Save ``candidate`` and adopt it; on failure the view is unchanged."""
        save_project(candidate, project_path(self.folder, candidate.name))
        self.project = candidate
        self._sync()

    def _candidate_tasks(self, candidate: Project) -> list[Task]:
        if self.focus_active:
            return candidate.active_tasks
        return candidate.completed_tasks

    # ── Focus ─────────────────────────────────────────────────────────

    def on_focus_gained(self, context: SharedContext) -> None:
        self.clear_popups()
        self.project = None
        self.active = SelectableList()
        self.completed = SelectableList()
        self.focus_active = True
        if context.project is None:
            return
        try:
            self.project = load_project(project_path(self.folder, context.project.name))
        except StorageError as e:
            self.fail(str(e))
            return
        self._sync()
        if context.task is not None:
            name = context.task.name
            if not self.active.select_first(lambda t: t.name == name):
                if self.completed.select_first(lambda t: t.name == name):
                    self.focus_active = False

    def on_focus_lost(self, context: SharedContext) -> None:
        if self.project is not None:
            context.publish_project(self.project)
        context.publish_task(self.selected_task)

    # ── Commands ──────────────────────────────────────────────────────

    def handle_command(self, key: KeyPress) -> bool:
        task = self.selected_task
        if key.key == "left":
            self.focus_active = True
        elif key.key == "right":
            self.focus_active = False
        elif key.key == "up":
            self.focused_list.previous()
        elif key.key == "down":
            self.focused_list.next()
        elif key.key not in ("a", "e", "n", "d", "c", "u"):
            return False
        elif self.project is None:
            self.show_message(NO_PROJECT)
        elif key.key == "a":
            self.open_popup(InputPopup("Enter task name"), TaskAction.ADD)
        elif key.key == "c":
            if self.focus_active and self.active:
                self.guarded(self._complete_selected)
        elif key.key == "u":
            if not self.focus_active and self.completed:
                self.guarded(self._uncomplete_selected)
        elif task is None:
            pass
        elif key.key == "e":
            self.open_popup(
                InputPopup("Edit task description", task.description),
                TaskAction.DESCRIBE,
            )
        elif key.key == "n":
            self.open_popup(InputPopup("Edit task name", task.name), TaskAction.RENAME)
        else:
            self.open_popup(ChoicePopup(f"Delete task: {task.name}"), TaskAction.DELETE)
        return True

    def _complete_selected(self) -> None:
        index = self.active.index
        if self.project is None or index is None:
            return
        candidate = copy.deepcopy(self.project)
        task = candidate.complete_task(index)
        self._commit(candidate)
        log(f"task completed: {candidate.name}/{task.name}")

    def _uncomplete_selected(self) -> None:
        index = self.completed.index
        if self.project is None or index is None:
            return
        candidate = copy.deepcopy(self.project)
        task = candidate.uncomplete_task(index)
        self._commit(candidate)
        log(f"task reopened: {candidate.name}/{task.name}")

    def submit(self, purpose: Enum, value: str) -> None:
        if self.project is None:
            raise InputRejected(NO_PROJECT)
        candidate = copy.deepcopy(self.project)
        if purpose is TaskAction.ADD:
            candidate.add_task(self._validate_name(value), SETTINGS.task_description)
            self._commit(candidate)
            self.focus_active = True
            self.active.select(len(self.active) - 1)
            return

        index = self.focused_list.index
        if index is None:
            return
        task = self._candidate_tasks(candidate)[index]
        if purpose is TaskAction.DESCRIBE:
            task.description = value
        elif purpose is TaskAction.RENAME:
            task.name = self._validate_name(value)
        self._commit(candidate)

    def confirm(self, purpose: Enum) -> None:
        if purpose is not TaskAction.DELETE or self.project is None:
            return
        index = self.focused_list.index
        if index is None:
            return
        candidate = copy.deepcopy(self.project)
        task = self._candidate_tasks(candidate).pop(index)
        self._commit(candidate)
        log(f"task deleted: {candidate.name}/{task.name}")

    @staticmethod
    def _validate_name(value: str) -> str:
        name = value.strip()
        if not name:
            raise InputRejected("Task name cannot be empty")
        return name

    # ── Rendering ─────────────────────────────────────────────────────

    def header(self) -> str:
        path = self.path
        return str(path) if path is not None else NO_PROJECT

    def render_body(self) -> RenderableType:
        if self.project is None:
            return text_panel("Tasks", Text(NO_PROJECT, style=MUTED))

        lists = Table.grid(expand=True)
        lists.add_column(ratio=1)
        lists.add_column(ratio=1)
        lists.add_row(
            list_panel(
                "Active tasks",
                (t.name for t in self.active),
                self.active.index,
                focused=self.focus_active,
            ),
            list_panel(
                "Completed tasks",
                (t.name for t in self.completed),
                self.completed.index,
                focused=not self.focus_active,
            ),
        )
        return Group(lists, self._detail_panel())

    def _detail_panel(self) -> RenderableType:
        task = self.selected_task
        if task is None:
            return text_panel("Task", "")
        details = Table.grid(padding=(0, 2))
        details.add_column(style=MUTED)
        details.add_column()
        details.add_row("Name", task.name)
        details.add_row("Description", task.description or "-")
        details.add_row("Time spent", str(task.time_spent))
        details.add_row("Estimate", str(task.estimate))
        details.add_row("Tags", ", ".join(task.tags) or "-")
        details.add_row("Sub tasks", str(len(task.sub_tasks)))
        return text_panel("Task", details)

    def commands_description(self) -> str:
        return (
            "Navigate with arrows | A: Add task | C: Mark as completed"
            " | U: Mark as incomplete | E: Edit task description"
            " | N: Rename task | D: Delete task | Tab: Back to projects"
        )

"""Core data types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _str_field(data: dict, key: str) -> str:
    value = data.get(key, "")
    if not isinstance(value, str):
        raise ValueError(f"field '{key}' must be a string")
    return value


def _int_field(data: dict, key: str) -> int:
    value = data.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field '{key}' must be an integer")
    return value


def _list_field(data: dict, key: str) -> list:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise ValueError(f"field '{key}' must be a list")
    return value


@dataclass
class Task:
    name: str
    description: str = ""
    time_spent: int = 0
    estimate: int = 0
    sub_tasks: list[Task] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)

    def add_sub_task(self, name: str, description: str) -> Task:
        task = Task(name=name, description=description)
        self.sub_tasks.append(task)
        return task

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "time_spent": self.time_spent,
            "estimate": self.estimate,
            "sub_tasks": [t.to_dict() for t in self.sub_tasks],
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        if not isinstance(data, dict):
            raise ValueError("task record must be an object")
        tags = _list_field(data, "tags")
        if not all(isinstance(tag, str) for tag in tags):
            raise ValueError("field 'tags' must be a list of strings")
        return cls(
            name=_str_field(data, "name"),
            description=_str_field(data, "description"),
            time_spent=_int_field(data, "time_spent"),
            estimate=_int_field(data, "estimate"),
            sub_tasks=[cls.from_dict(t) for t in _list_field(data, "sub_tasks")],
            tags=list(tags),
        )


@dataclass
class Project:
    name: str
    description: str = ""
    active_tasks: list[Task] = field(default_factory=list)
    completed_tasks: list[Task] = field(default_factory=list)

    def add_task(self, name: str, description: str) -> Task:
        task = Task(name=name, description=description)
        self.active_tasks.append(task)
        return task

    def complete_task(self, index: int) -> Task:
        """Move an active task to the end of the completed list."""
        if not 0 <= index < len(self.active_tasks):
            raise IndexError(f"no active task at index {index}")
        task = self.active_tasks.pop(index)
        self.completed_tasks.append(task)
        return task

    def uncomplete_task(self, index: int) -> Task:
        """Move a completed task back to the end of the active list."""
        if not 0 <= index < len(self.completed_tasks):
            raise IndexError(f"no completed task at index {index}")
        task = self.completed_tasks.pop(index)
        self.active_tasks.append(task)
        return task

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "active_tasks": [t.to_dict() for t in self.active_tasks],
            "completed_tasks": [t.to_dict() for t in self.completed_tasks],
        }

    @classmethod
    def from_dict(cls, data: Any) -> Project:
        if not isinstance(data, dict):
            raise ValueError("project record must be an object")
        return cls(
            name=_str_field(data, "name"),
            description=_str_field(data, "description"),
            active_tasks=[
                Task.from_dict(t) for t in _list_field(data, "active_tasks")
            ],
            completed_tasks=[
                Task.from_dict(t) for t in _list_field(data, "completed_tasks")
            ],
        )

"""Non-interactive CLI commands."""

from __future__ import annotations

import argparse

from .config import resolve_work_folder
from .storage import list_projects


def cmd_list(args: argparse.Namespace) -> None:
    folder = resolve_work_folder(args.root)
    projects = list_projects(folder)
    if not projects:
        print(f"No projects in {folder}. Launch with: pman")
        return
    for p in projects:
        print(
            f"  {p.name:24s} active:{len(p.active_tasks):3d}  "
            f"completed:{len(p.completed_tasks):3d}"
        )


def cmd_path(args: argparse.Namespace) -> None:
    print(resolve_work_folder(args.root))

"""CLI entry point: argument parsing and dispatch."""

import argparse

from .commands import cmd_list, cmd_path
from .config import ensure_work_folder, resolve_work_folder
from .dashboard.app import cmd_dashboard


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pman",
        description="Browse and edit projects and their tasks in the terminal",
    )
    parser.add_argument(
        "root",
        nargs="?",
        help="Directory holding the .pman project folder (default: home)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--list",
        dest="func",
        action="store_const",
        const=cmd_list,
        help="Print projects with their task counts and exit",
    )
    mode.add_argument(
        "--path",
        dest="func",
        action="store_const",
        const=cmd_path,
        help="Print the resolved project folder and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    if args.func is not None:
        args.func(args)
        return
    folder = ensure_work_folder(resolve_work_folder(args.root))
    cmd_dashboard(folder)


if __name__ == "__main__":
    main()

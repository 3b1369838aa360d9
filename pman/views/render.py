"""Rich building blocks shared by the project and task views."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

BORDER = "#1a3a3a"
BORDER_FOCUSED = "#00d7d7"
SELECTED = "bold #000000 on #cccccc"
SELECTED_DIM = "#000000 on #447777"
MUTED = "#3a5a5a"


def list_panel(
    title: str,
    names: Iterable[str],
    index: int | None,
    *,
    focused: bool = True,
    empty: str = "(empty)",
) -> Panel:
    """A bordered list of names with the selected row highlighted."""
    body = Text(no_wrap=True, overflow="ellipsis")
    rows = list(names)
    for i, name in enumerate(rows):
        if i:
            body.append("\n")
        if i == index:
            body.append(f" {name} ", style=SELECTED if focused else SELECTED_DIM)
        else:
            body.append(f" {name}")
    if not rows:
        body.append(empty, style=MUTED)
    return Panel(
        body,
        title=title,
        title_align="left",
        border_style=BORDER_FOCUSED if focused else BORDER,
    )


def text_panel(title: str, content: RenderableType | str) -> Panel:
    if isinstance(content, str):
        content = Text(content) if content else Text("-", style=MUTED)
    return Panel(content, title=title, title_align="left", border_style=BORDER)

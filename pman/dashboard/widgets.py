"""Custom widgets: ViewTabs."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static


class ViewTabs(Static):
    """One-line strip naming the top-level views, focused one highlighted."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__("", *args, **kwargs)
        self._tabs: tuple[str, ...] = ()
        self._focused: int = 0

    def render_tabs(self) -> Text:
        text = Text()
        for i, title in enumerate(self._tabs):
            if i:
                text.append(" │ ", style="#1a3a3a")
            if i == self._focused:
                text.append(f" {title} ", style="bold #000000 on #00d7d7")
            else:
                text.append(f" {title} ", style="#447777")
        return text

    def set_tabs(self, tabs: tuple[str, ...], focused: int) -> None:
        if (tabs, focused) == (self._tabs, self._focused):
            return
        self._tabs = tabs
        self._focused = focused
        self.update(self.render_tabs())

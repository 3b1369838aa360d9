"""Modal overlay used to show the focused view's popup."""

from __future__ import annotations

from rich.console import RenderableType
from textual.app import ComposeResult
from textual.screen import ModalScreen
from textual.widgets import Static

from .css import POPUP_CSS


class PopupScreen(ModalScreen):
    """Displays a popup renderable over the dimmed view.

    Has no bindings of its own: keys bubble up to the app, which routes
    them to the owning view.
    """

    CSS = POPUP_CSS

    def __init__(self, renderable: RenderableType) -> None:
        super().__init__()
        self._renderable = renderable
        self._box: Static | None = None

    def compose(self) -> ComposeResult:
        self._box = Static(self._renderable, id="popup-box")
        yield self._box

    def show(self, renderable: RenderableType) -> None:
        self._renderable = renderable
        if self._box is not None:
            self._box.update(renderable)

"""pman TUI dashboard: main App class."""

from __future__ import annotations

from pathlib import Path

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Label, Static
from rich.console import RenderableType

from ..context import SharedContext
from ..events import KeyPress, Tick
from ..logs import log
from ..router import Frame, Router
from ..settings import SETTINGS
from ..views.project import ProjectView
from ..views.task import TaskView
from .css import APP_CSS
from .screens import PopupScreen
from .widgets import ViewTabs


def build_router(folder: Path) -> Router:
    """The two top-level views: projects (with nested tasks) and tasks."""
    return Router(
        [ProjectView(folder, detail_factory=TaskView), TaskView(folder)],
        SharedContext(folder),
    )


class PmanApp(App):
    """Hosts the router; acts as its drawing surface.

    Every key goes to the router before Textual's own bindings; keys the
    router consumes are stopped here.
    """

    TITLE = "pman"
    DEFAULT_CSS = APP_CSS
    ENABLE_COMMAND_PALETTE = False

    def __init__(self, folder: Path) -> None:
        super().__init__()
        self.folder = folder
        self.router = build_router(folder)
        self._tabs = ViewTabs(id="view-tabs")
        self._header = Static("", id="header-line")
        self._body = Static("", id="view-body")
        self._footer = Static("", id="footer-line")
        self._popup_screen: PopupScreen | None = None

    def compose(self) -> ComposeResult:
        yield Vertical(
            Horizontal(
                Label("▣ pman", id="title-text"),
                self._tabs,
                id="title-bar",
            ),
            self._header,
            self._body,
            id="main-content",
        )
        yield self._footer

    def on_mount(self) -> None:
        log(f"dashboard started: {self.folder}")
        self.router.start()
        self.refresh_view()
        self.set_interval(SETTINGS.tick_interval, self.tick)

    def tick(self) -> None:
        self.router.handle(Tick())
        self.refresh_view()

    def on_key(self, event: events.Key) -> None:
        """Route every key through the focused view first."""
        key = KeyPress(event.key, event.character if event.is_printable else None)
        if self.router.handle(key):
            event.prevent_default()
            event.stop()
        if not self.router.running:
            log("dashboard quit")
            self.exit()
            return
        self.refresh_view()

    def refresh_view(self) -> None:
        self.router.render(self)

    # ── Surface ───────────────────────────────────────────────────────

    def paint(self, frame: Frame) -> None:
        self._tabs.set_tabs(frame.tabs, frame.focused)
        self._header.update(frame.header)
        self._body.update(frame.body)
        self._footer.update(frame.footer)
        self._sync_popup(frame.popup)

    def _sync_popup(self, popup: RenderableType | None) -> None:
        if popup is None:
            if self._popup_screen is not None:
                self._popup_screen = None
                self.pop_screen()
            return
        if self._popup_screen is None:
            self._popup_screen = PopupScreen(popup)
            self.push_screen(self._popup_screen)
        else:
            self._popup_screen.show(popup)


def cmd_dashboard(folder: Path) -> None:
    app = PmanApp(folder)
    app.run()

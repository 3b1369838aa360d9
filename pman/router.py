"""Focus and event routing across the top-level views."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar, Protocol

from rich.console import RenderableType

from .context import SharedContext
from .events import Event, KeyPress, Tick
from .logs import log
from .views.base import View


@dataclass
class Frame:
    """Everything needed to draw one screen."""

    tabs: tuple[str, ...]
    focused: int
    header: str
    body: RenderableType
    popup: RenderableType | None
    footer: str


class Surface(Protocol):
    def paint(self, frame: Frame) -> None: ...


class Router:
    """Owns the ordered views, the focus index and the run flag.

    Keys go to the focused view first; whatever it leaves unconsumed is
    looked up in ``GLOBAL_BINDINGS``.
    """

    GLOBAL_BINDINGS: ClassVar[dict[str, str]] = {
        "q": "quit",
        "tab": "next_view",
        "shift+tab": "previous_view",
    }

    def __init__(self, views: Sequence[View], context: SharedContext) -> None:
        if not views:
            raise ValueError("Router needs at least one view")
        self.views: list[View] = list(views)
        self.context = context
        self.index = 0
        self.running = True

    @property
    def focused(self) -> View:
        return self.views[self.index]

    def start(self) -> None:
        self.focused.on_focus_gained(self.context)

    def advance(self, step: int) -> None:
        self.focused.on_focus_lost(self.context)
        self.index = (self.index + step) % len(self.views)
        log(f"focus -> {self.focused.title or type(self.focused).__name__}")
        self.focused.on_focus_gained(self.context)

    def next_view(self) -> None:
        self.advance(1)

    def previous_view(self) -> None:
        self.advance(-1)

    def quit(self) -> None:
        self.running = False

    def handle(self, event: Event) -> bool:
        """Route one event; report whether anything consumed it."""
        if isinstance(event, Tick):
            self.focused.on_tick()
            return True
        if not isinstance(event, KeyPress):
            return False
        if self.focused.handle_key(event):
            return True
        action = self.GLOBAL_BINDINGS.get(event.key)
        if action is None:
            return False
        getattr(self, action)()
        return True

    def frame(self) -> Frame:
        view = self.focused
        return Frame(
            tabs=tuple(v.title for v in self.views),
            focused=self.index,
            header=view.current_header(),
            body=view.render(),
            popup=view.render_popup(),
            footer=view.controls_description(),
        )

    def render(self, surface: Surface) -> None:
        surface.paint(self.frame())

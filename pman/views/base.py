"""View base class: input modes, popup routing, delegation to a child view."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from pathlib import Path

from rich.console import Group, RenderableType

from ..context import SharedContext
from ..events import KeyPress
from ..logs import log
from ..popups import ChoicePopup, InputPopup, MessagePopup, Popup
from ..storage import StorageError


class InputMode(str, Enum):
    NORMAL = "NORMAL"
    WRITE = "WRITE"
    DELEGATED = "DELEGATED"


class InputRejected(Exception):
    """Typed input failed validation; the input popup stays open."""


class View:
    """A focusable screen.

    Key routing by mode:

    - NORMAL: ``handle_command`` maps keys to commands; unknown keys are
      reported as not consumed.
    - WRITE: the message popup (if active) gets the key, else the data
      entry / confirmation popup. With nothing active the view drops back
      to NORMAL and re-dispatches the key. Every key is consumed.
    - DELEGATED: the child view gets the key; an unconsumed Escape closes
      the child.

    Subclasses implement ``handle_command``, ``render_body``,
    ``commands_description``, ``submit`` (input popups) and ``confirm``
    (choice popups). ``submit``/``confirm`` may raise ``StorageError`` or
    ``InputRejected``; both end up in a message popup.
    """

    title = ""

    def __init__(self, folder: Path) -> None:
        self.folder = folder
        self.mode = InputMode.NORMAL
        self.popup: InputPopup | ChoicePopup | None = None
        self.purpose: Enum | None = None
        self.message: MessagePopup | None = None
        self.child: View | None = None
        self._child_context: SharedContext | None = None

    # ── Subclass hooks ────────────────────────────────────────────────

    def handle_command(self, key: KeyPress) -> bool:
        return False

    def submit(self, purpose: Enum, value: str) -> None:
        pass

    def confirm(self, purpose: Enum) -> None:
        pass

    def on_focus_gained(self, context: SharedContext) -> None:
        pass

    def on_focus_lost(self, context: SharedContext) -> None:
        pass

    def on_child_closed(self, context: SharedContext) -> None:
        pass

    def on_tick(self) -> None:
        if self.child is not None:
            self.child.on_tick()

    def header(self) -> str:
        return str(self.folder)

    def render_body(self) -> RenderableType:
        raise NotImplementedError

    def commands_description(self) -> str:
        return ""

    # ── Popups ────────────────────────────────────────────────────────

    def blocking_popup(self) -> Popup | None:
        if self.message is not None and self.message.active:
            return self.message
        if self.popup is not None and self.popup.active:
            return self.popup
        return None

    def open_popup(self, popup: InputPopup | ChoicePopup, purpose: Enum) -> None:
        self.popup = popup
        self.purpose = purpose
        self.mode = InputMode.WRITE

    def show_message(self, text: str, *, error: bool = True) -> None:
        self.message = MessagePopup(text, error=error)
        self.mode = InputMode.WRITE

    def retire_popup(self) -> None:
        if self.popup is not None:
            self.popup.reset_completion()
            self.popup.set_active(False)
        self.popup = None
        self.purpose = None
        self._settle_mode()

    def clear_popups(self) -> None:
        self.message = None
        self.retire_popup()

    def fail(self, text: str) -> None:
        """Report a failed action, keeping any typed input for a retry."""
        log(f"{type(self).__name__}: {text}")
        if self.popup is not None:
            self.popup.reset_completion()
        self.show_message(text)

    def guarded(self, action: Callable[[], None]) -> None:
        try:
            action()
        except (StorageError, InputRejected) as e:
            self.fail(str(e))

    def _settle_mode(self) -> None:
        if self.mode is InputMode.WRITE and self.blocking_popup() is None:
            self.mode = InputMode.NORMAL

    # ── Delegation ────────────────────────────────────────────────────

    def open_child(self, child: View, context: SharedContext) -> None:
        self.child = child
        self._child_context = context
        child.on_focus_gained(context)
        self.mode = InputMode.DELEGATED

    def close_child(self) -> None:
        child, context = self.child, self._child_context
        self.child = None
        self._child_context = None
        self.mode = InputMode.NORMAL
        if child is not None and context is not None:
            child.on_focus_lost(context)
            self.on_child_closed(context)

    # ── Key routing ───────────────────────────────────────────────────

    def handle_key(self, key: KeyPress) -> bool:
        if self.mode is InputMode.WRITE:
            return self._handle_write(key)
        if self.mode is InputMode.DELEGATED:
            return self._handle_delegated(key)
        return self.handle_command(key)

    def _handle_write(self, key: KeyPress) -> bool:
        popup = self.blocking_popup()
        if popup is None:
            self.message = None
            self.popup = None
            self.mode = InputMode.NORMAL
            return self.handle_key(key)

        popup.handle_key(key)
        if isinstance(popup, MessagePopup):
            if popup.completed or not popup.active:
                popup.reset_completion()
                popup.set_active(False)
                self.message = None
                self._settle_mode()
        elif isinstance(popup, InputPopup):
            if popup.completed:
                self._submit_input(popup)
            elif not popup.active:
                self.retire_popup()
        elif isinstance(popup, ChoicePopup):
            if popup.completed:
                purpose, choice = self.purpose, popup.choice
                self.retire_popup()
                if choice and purpose is not None:
                    self.guarded(lambda: self.confirm(purpose))
            elif not popup.active:
                self.retire_popup()
        return True

    def _submit_input(self, popup: InputPopup) -> None:
        if self.purpose is None:
            self.retire_popup()
            return
        try:
            self.submit(self.purpose, popup.value)
        except (StorageError, InputRejected) as e:
            self.fail(str(e))
            return
        self.retire_popup()

    def _handle_delegated(self, key: KeyPress) -> bool:
        if self.child is None:
            self.mode = InputMode.NORMAL
            return self.handle_key(key)
        if self.child.handle_key(key):
            return True
        if key.key == "escape":
            self.close_child()
            return True
        return False

    # ── Rendering ─────────────────────────────────────────────────────

    def render(self) -> RenderableType:
        if self.mode is InputMode.DELEGATED and self.child is not None:
            return self.child.render()
        return self.render_body()

    def render_popup(self) -> RenderableType | None:
        if self.mode is InputMode.DELEGATED and self.child is not None:
            return self.child.render_popup()
        layers: list[RenderableType] = []
        if self.popup is not None and self.popup.active:
            layers.append(self.popup.render())
        if self.message is not None and self.message.active:
            layers.append(self.message.render())
        if not layers:
            return None
        if len(layers) == 1:
            return layers[0]
        return Group(*layers)

    def controls_description(self) -> str:
        if self.mode is InputMode.DELEGATED and self.child is not None:
            return f"{self.child.controls_description()} | Esc: Back"
        popup = self.blocking_popup()
        if popup is not None:
            return popup.controls_description()
        return self.commands_description()

    def current_header(self) -> str:
        if self.mode is InputMode.DELEGATED and self.child is not None:
            return self.child.header()
        return self.header()

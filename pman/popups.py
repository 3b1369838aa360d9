"""Modal popups: message, yes/no choice, and text input.

A popup is created active. While active it receives every key of its
owning view. ``completed`` flips on Enter; the owner reads the result in
the same key pass, then calls ``reset_completion()`` and
``set_active(False)`` to retire it. Escape deactivates any popup without
completing it.
"""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from .events import KeyPress

_BORDER = "#00d7d7"
_ERROR_BORDER = "#ff5f5f"
_CHOICE_ON = "bold #000000 on #00d7d7"
_CHOICE_OFF = "#447777"


class Popup:
    """Shared active/completed bookkeeping."""

    def __init__(self) -> None:
        self._active = True
        self._completed = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def completed(self) -> bool:
        return self._completed

    def set_active(self, active: bool) -> None:
        self._active = active

    def reset_completion(self) -> None:
        self._completed = False

    def handle_key(self, key: KeyPress) -> None:
        if key.key == "enter":
            self._completed = True
        elif key.key == "escape":
            self._active = False

    def controls_description(self) -> str:
        raise NotImplementedError

    def render(self) -> RenderableType:
        raise NotImplementedError


class MessagePopup(Popup):
    def __init__(self, text: str, *, error: bool = False) -> None:
        super().__init__()
        self.text = text
        self.error = error

    def controls_description(self) -> str:
        return "Enter: Continue"

    def render(self) -> RenderableType:
        return Panel(
            Text(self.text, justify="center"),
            title="Error" if self.error else "Message",
            subtitle="[ Ok ]",
            border_style=_ERROR_BORDER if self.error else _BORDER,
            padding=(1, 2),
        )


class ChoicePopup(Popup):
    def __init__(self, prompt: str) -> None:
        super().__init__()
        self.prompt = prompt
        self.choice = False

    def handle_key(self, key: KeyPress) -> None:
        if key.key in ("left", "y"):
            self.choice = True
        elif key.key in ("right", "n"):
            self.choice = False
        else:
            super().handle_key(key)

    def controls_description(self) -> str:
        return "←: Yes | →: No | Enter: Confirm selection | Esc: Cancel"

    def render(self) -> RenderableType:
        buttons = Text(justify="center")
        buttons.append("  Yes  ", style=_CHOICE_ON if self.choice else _CHOICE_OFF)
        buttons.append("    ")
        buttons.append("  No  ", style=_CHOICE_OFF if self.choice else _CHOICE_ON)
        return Panel(
            Group(Text(self.prompt, justify="center"), Text(""), buttons),
            title="Confirm",
            border_style=_BORDER,
            padding=(1, 2),
        )


class InputPopup(Popup):
    def __init__(self, prompt: str, value: str = "") -> None:
        super().__init__()
        self.prompt = prompt
        self.value = value

    def handle_key(self, key: KeyPress) -> None:
        if key.key == "backspace":
            self.value = self.value[:-1]
        elif key.is_printable:
            self.value += key.character or ""
        else:
            super().handle_key(key)

    def controls_description(self) -> str:
        return "Esc: Cancel | Enter: Confirm entry"

    def render(self) -> RenderableType:
        line = Text(self.value)
        line.append("▏", style=f"bold {_BORDER}")
        return Panel(
            line,
            title=self.prompt,
            border_style=_BORDER,
            padding=(1, 2),
        )

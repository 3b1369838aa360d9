"""Events consumed by the router: key presses and redraw ticks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyPress:
    """A key name in Textual's vocabulary plus its printable character.

    ``key`` is e.g. ``"a"``, ``"enter"``, ``"shift+tab"``; ``character`` is
    set only for keys that insert text (``"space"`` carries ``" "``).
    """

    key: str
    character: str | None = None

    @classmethod
    def of(cls, key: str) -> KeyPress:
        if key == "space":
            return cls(key, " ")
        if len(key) == 1 and key.isprintable():
            return cls(key, key)
        return cls(key)

    @property
    def is_printable(self) -> bool:
        return self.character is not None


@dataclass(frozen=True)
class Tick:
    pass


Event = KeyPress | Tick

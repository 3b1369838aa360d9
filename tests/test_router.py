"""Tests for focus routing, global keys and frame rendering."""

import pytest

from pman.context import SharedContext
from pman.events import KeyPress, Tick
from pman.router import Router
from pman.views.base import InputMode, View
from pman.views.project import ProjectView
from pman.views.task import TaskView
from tests.helpers import RecordingSurface, make_project, press, type_text


class _CountingView(View):
    title = "Counting"

    def __init__(self, folder) -> None:
        super().__init__(folder)
        self.ticks = 0
        self.gained = 0
        self.lost = 0

    def on_tick(self) -> None:
        self.ticks += 1

    def on_focus_gained(self, context) -> None:
        self.gained += 1

    def on_focus_lost(self, context) -> None:
        self.lost += 1

    def render_body(self):
        return "body"


def _router(folder) -> Router:
    router = Router(
        [ProjectView(folder, detail_factory=TaskView), TaskView(folder)],
        SharedContext(folder),
    )
    router.start()
    return router


def test_router_requires_views(tmp_path) -> None:
    with pytest.raises(ValueError):
        Router([], SharedContext(tmp_path))


def test_focus_round_trip_restores_selected_project(tmp_path) -> None:
    for name in ("A", "B", "C"):
        make_project(tmp_path, name, active=(f"{name}-task",))
    router = _router(tmp_path)

    press(router, "down")
    assert router.focused.selected.name == "B"

    press(router, "tab")
    assert router.index == 1
    assert router.focused.project.name == "B"
    assert [t.name for t in router.focused.active] == ["B-task"]

    press(router, "tab")
    assert router.index == 0
    assert router.focused.selected.name == "B"


def test_shift_tab_at_zero_wraps_to_last_view(tmp_path) -> None:
    views = [_CountingView(tmp_path) for _ in range(3)]
    router = Router(views, SharedContext(tmp_path))
    router.start()

    press(router, "shift+tab")

    assert router.index == 2
    assert views[0].lost == 1
    assert views[2].gained == 1


def test_advance_uses_modular_arithmetic(tmp_path) -> None:
    router = Router([_CountingView(tmp_path) for _ in range(3)], SharedContext(tmp_path))

    router.advance(-4)
    assert router.index == 2
    router.advance(5)
    assert router.index == 1


def test_q_quits_only_when_view_does_not_consume(tmp_path) -> None:
    router = _router(tmp_path)

    press(router, "a", "q")
    assert router.running is True
    assert router.focused.popup.value == "q"

    press(router, "escape", "q")
    assert router.running is False


def test_unbound_key_is_reported_unhandled(tmp_path) -> None:
    router = _router(tmp_path)

    assert press(router, "x") == [False]


def test_tick_reaches_focused_view_only(tmp_path) -> None:
    views = [_CountingView(tmp_path), _CountingView(tmp_path)]
    router = Router(views, SharedContext(tmp_path))

    assert router.handle(Tick()) is True
    router.advance(1)
    router.handle(Tick())

    assert [v.ticks for v in views] == [1, 1]


def test_render_paints_frame_of_focused_view(tmp_path) -> None:
    make_project(tmp_path, "Demo")
    router = _router(tmp_path)
    surface = RecordingSurface()

    router.render(surface)

    frame = surface.last
    assert frame.tabs == ("Projects", "Tasks")
    assert frame.focused == 0
    assert frame.header == str(tmp_path)
    assert frame.popup is None
    assert frame.footer.startswith("Q: Quit")


def test_render_includes_popup_and_its_controls(tmp_path) -> None:
    router = _router(tmp_path)
    surface = RecordingSurface()

    press(router, "a")
    type_text(router, "Dem")
    router.render(surface)

    assert surface.last.popup is not None
    assert surface.last.footer == "Esc: Cancel | Enter: Confirm entry"


def test_add_project_through_router(tmp_path) -> None:
    router = _router(tmp_path)

    press(router, "a")
    type_text(router, "Demo")
    press(router, "enter")

    assert (tmp_path / "Demo.pman").exists()
    assert router.focused.selected.name == "Demo"
    assert router.focused.mode is InputMode.NORMAL


def test_nested_task_view_escape_then_tab(tmp_path) -> None:
    make_project(tmp_path, "A", active=("t",))
    router = _router(tmp_path)

    press(router, "enter")
    assert router.focused.mode is InputMode.DELEGATED
    assert router.frame().footer.endswith("Esc: Back")

    # Tab is not consumed by the child, so the router switches views.
    press(router, "tab")
    assert router.index == 1
    assert router.views[0].mode is InputMode.NORMAL
    assert router.focused.project.name == "A"


def test_keypress_of_maps_printable_characters() -> None:
    assert KeyPress.of("a") == KeyPress("a", "a")
    assert KeyPress.of("space") == KeyPress("space", " ")
    assert KeyPress.of("enter").is_printable is False

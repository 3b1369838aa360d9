"""Tests for the Textual dashboard glue (key routing, painting)."""

from pman.dashboard.app import PmanApp
from pman.dashboard.screens import PopupScreen
from pman.dashboard.widgets import ViewTabs
from pman.router import Frame
from tests.helpers import make_project


class _DummyKey:
    def __init__(self, key: str, character: str | None = None) -> None:
        self.key = key
        self.character = character
        self.is_printable = character is not None
        self.prevented = False
        self.stopped = False

    def prevent_default(self) -> None:
        self.prevented = True

    def stop(self) -> None:
        self.stopped = True


class _DummyStatic:
    def __init__(self) -> None:
        self.content = None
        self.tabs = None

    def update(self, content) -> None:
        self.content = content

    def set_tabs(self, tabs, focused) -> None:
        self.tabs = (tabs, focused)


def _app(tmp_path, monkeypatch) -> PmanApp:
    app = PmanApp(tmp_path)
    app.router.start()
    monkeypatch.setattr(app, "refresh_view", lambda: None)
    return app


def test_consumed_keys_are_stopped(tmp_path, monkeypatch) -> None:
    app = _app(tmp_path, monkeypatch)
    event = _DummyKey("a", "a")

    app.on_key(event)

    assert event.prevented is True
    assert event.stopped is True
    assert app.router.focused.popup is not None


def test_unconsumed_keys_fall_through_to_textual(tmp_path, monkeypatch) -> None:
    app = _app(tmp_path, monkeypatch)
    event = _DummyKey("ctrl+x")

    app.on_key(event)

    assert event.prevented is False
    assert event.stopped is False


def test_q_exits_app(tmp_path, monkeypatch) -> None:
    app = _app(tmp_path, monkeypatch)
    exits = []
    monkeypatch.setattr(app, "exit", lambda *a, **kw: exits.append(True))

    app.on_key(_DummyKey("q", "q"))

    assert exits == [True]
    assert app.router.running is False


def test_tab_switches_focus_through_app(tmp_path, monkeypatch) -> None:
    make_project(tmp_path, "Demo")
    app = _app(tmp_path, monkeypatch)
    event = _DummyKey("tab")

    app.on_key(event)

    assert event.prevented is True
    assert app.router.index == 1
    assert app.router.focused.project.name == "Demo"


def test_paint_updates_widgets_and_toggles_popup(tmp_path, monkeypatch) -> None:
    app = PmanApp(tmp_path)
    for attr in ("_tabs", "_header", "_body", "_footer"):
        monkeypatch.setattr(app, attr, _DummyStatic())
    pushed: list[object] = []
    popped: list[bool] = []
    monkeypatch.setattr(app, "push_screen", lambda screen: pushed.append(screen))
    monkeypatch.setattr(app, "pop_screen", lambda: popped.append(True))

    app.paint(Frame(("Projects", "Tasks"), 0, "hdr", "body", "popup", "ftr"))

    assert app._tabs.tabs == (("Projects", "Tasks"), 0)
    assert app._header.content == "hdr"
    assert app._body.content == "body"
    assert app._footer.content == "ftr"
    assert len(pushed) == 1
    assert isinstance(pushed[0], PopupScreen)

    app.paint(Frame(("Projects", "Tasks"), 0, "hdr", "body", "popup 2", "ftr"))
    assert len(pushed) == 1
    assert pushed[0]._renderable == "popup 2"

    app.paint(Frame(("Projects", "Tasks"), 0, "hdr", "body", None, "ftr"))
    assert popped == [True]
    assert app._popup_screen is None


def test_view_tabs_highlight_focused_title() -> None:
    tabs = ViewTabs()
    tabs._tabs = ("Projects", "Tasks")
    tabs._focused = 1

    text = tabs.render_tabs()

    assert text.plain == " Projects  │  Tasks "
    focused_span = [s for s in text.spans if "on #00d7d7" in str(s.style)]
    assert text.plain[focused_span[0].start:focused_span[0].end] == " Tasks "

"""Tests for liveprops.textual — Textual integration layer."""

import threading

import pytest
from textual.css.query import NoMatches

from liveprops import LiveObject, prop
from liveprops import textual as ltx


class _Widget:
    def __init__(self):
        self.disabled = False
        self.border_title = ""


class _MockApp:
    """Minimal mock matching the Textual App interface ltx needs."""

    def __init__(self, *, is_running=True, widgets=None):
        self.is_running = is_running
        self.widgets = widgets or {}
        self._call_from_thread_log = []

    def query_one(self, selector):
        try:
            return self.widgets[selector]
        except KeyError:
            raise NoMatches(f"No nodes match {selector!r}") from None

    def call_from_thread(self, fn, *args):
        self._call_from_thread_log.append((fn, args))
        fn(*args)


class TestEnableDisable:
    def test_toggle(self):
        w = _Widget()
        ltx.disable(w)
        assert w.disabled is True
        ltx.enable(w)
        assert w.disabled is False


class TestBindWidget:
    def test_applies_immediately(self):
        submit = _Widget()
        app = _MockApp(widgets={"#submit": submit})
        form = LiveObject(invalid=True)
        ltx.bind_widget(app, form, "invalid", "#submit")
        assert submit.disabled is True

    def test_follows_changes(self):
        submit = _Widget()
        app = _MockApp(widgets={"#submit": submit})
        form = LiveObject(invalid=True)
        ltx.bind_widget(app, form, "invalid", "#submit")
        form.set("invalid", False)
        assert submit.disabled is False

    def test_follows_computed_property(self):
        submit = _Widget()
        app = _MockApp(widgets={"#submit": submit})
        form = LiveObject(
            name="",
            ready=prop(["name"], lambda self: bool(self.get("name"))),
        )
        ltx.bind_widget(app, form, "ready", "#submit", transform=lambda v: not v)
        assert submit.disabled is True
        form.set("name", "ada")
        assert submit.disabled is False

    def test_custom_attribute(self):
        header = _Widget()
        app = _MockApp(widgets={"#header": header})
        form = LiveObject(title="Draft")
        ltx.bind_widget(app, form, "title", "#header", "border_title")
        form.set("title", "Final")
        assert header.border_title == "Final"

    def test_skips_when_not_running(self):
        submit = _Widget()
        app = _MockApp(is_running=False, widgets={"#submit": submit})
        form = LiveObject(invalid=True)
        ltx.bind_widget(app, form, "invalid", "#submit")
        assert submit.disabled is False

    def test_skips_during_pause(self):
        submit = _Widget()
        app = _MockApp(widgets={"#submit": submit})
        form = LiveObject(invalid=False)
        ltx.bind_widget(app, form, "invalid", "#submit")
        with ltx.pause(app):
            form.set("invalid", True)
        assert submit.disabled is False

    def test_catches_nomatch(self):
        """Missing widgets are silently skipped."""
        app = _MockApp()
        form = LiveObject(invalid=True)
        ltx.bind_widget(app, form, "invalid", "#gone")
        form.set("invalid", False)

    def test_propagates_real_errors(self):
        app = _MockApp(widgets={"#submit": _Widget()})
        form = LiveObject(invalid=True)

        def _boom(v):
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            ltx.bind_widget(app, form, "invalid", "#submit", transform=_boom)

    def test_dispose_stops_updates(self):
        submit = _Widget()
        app = _MockApp(widgets={"#submit": submit})
        form = LiveObject(invalid=True)
        dispose = ltx.bind_widget(app, form, "invalid", "#submit")
        dispose()
        form.set("invalid", False)
        assert submit.disabled is True

    def test_thread_marshal(self):
        """Changes from a background thread use call_from_thread."""
        submit = _Widget()
        app = _MockApp(widgets={"#submit": submit})
        form = LiveObject(invalid=False)
        ltx.bind_widget(app, form, "invalid", "#submit")

        t = threading.Thread(target=lambda: form.set("invalid", True))
        t.start()
        t.join()

        assert submit.disabled is True
        assert len(app._call_from_thread_log) == 1


class TestPause:
    def test_pause_restores_on_exception(self):
        app = _MockApp()
        assert ltx.is_safe(app)

        with pytest.raises(RuntimeError):
            with ltx.pause(app):
                assert not ltx.is_safe(app)
                raise RuntimeError("oops")

        assert ltx.is_safe(app)

    def test_pause_does_not_mutate_app(self):
        app = _MockApp()
        attrs_before = set(vars(app))
        with ltx.pause(app):
            attrs_during = set(vars(app))
        assert attrs_before == attrs_during
        assert attrs_before == set(vars(app))

    def test_multiple_apps_independent(self):
        app_a = _MockApp()
        app_b = _MockApp()
        with ltx.pause(app_a):
            assert not ltx.is_safe(app_a)
            assert ltx.is_safe(app_b)

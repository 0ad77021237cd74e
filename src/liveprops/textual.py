"""Textual integration for liveprops. Opt-in — requires textual.

Widget coupling lives here; the core package stays UI-agnostic.
_paused_apps is owned by this module: an id is present only while inside
a pause() block for that app.
"""

import logging
import threading
from contextlib import contextmanager

from textual.css.query import NoMatches

from liveprops.smart import change_event

logger = logging.getLogger("liveprops.textual")

# Keyed by id(app) so multiple apps work in tests.
_paused_apps: set[int] = set()


def disable(widget) -> None:
    widget.disabled = True


def enable(widget) -> None:
    widget.disabled = False


@contextmanager
def pause(app):
    """Suspend widget bindings during widget replacement."""
    key = id(app)
    _paused_apps.add(key)
    try:
        yield
    finally:
        _paused_apps.discard(key)


def is_safe(app) -> bool:
    """Is the widget tree in a queryable state?"""
    return app.is_running and id(app) not in _paused_apps


def bind_widget(app, obj, name, selector, attribute="disabled", transform=None):
    """Mirror obj's `name` onto an attribute of the widget matching `selector`.

    Applies once immediately, then on every change event for `name`.
    Skipped while the app isn't running or is paused; NoMatches from the
    query is swallowed; changes from another thread go through
    app.call_from_thread.

    Returns a function that removes the subscription.

    Usage:
        bind_widget(app, form, "invalid", "#submit")               # disables #submit
        bind_widget(app, form, "title", "#header", "border_title")
        bind_widget(app, form, "ready", "#submit", transform=lambda v: not v)
    """
    _main = threading.get_ident()

    def _apply():
        value = obj.get(name)
        if transform is not None:
            value = transform(value)
        try:
            widget = app.query_one(selector)
        except NoMatches:
            logger.debug("No widget for %s; skipped %s", selector, name)
            return
        setattr(widget, attribute, value)

    def _guarded():
        if not is_safe(app):
            return
        if threading.get_ident() != _main:
            app.call_from_thread(_apply)
        else:
            _apply()

    dispose = obj.on(change_event(name), _guarded)
    _guarded()
    return dispose

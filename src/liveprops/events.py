"""Per-object event surface — named events with ordered handler lists.

Mix `Events` into any class to get on/off/trigger. Each instance owns its
own handler table; there is no process-wide registry.
"""

from __future__ import annotations

from typing import Callable

Handler = Callable[..., None]
Disposer = Callable[[], None]


class Events:
    """Mixin: subscribe handlers to named events and fire them synchronously."""

    @property
    def _handlers(self) -> dict[str, list[Handler]]:
        # Created on first use so the mixin needs no __init__.
        try:
            return self.__dict__["_event_handlers"]
        except KeyError:
            table: dict[str, list[Handler]] = {}
            self.__dict__["_event_handlers"] = table
            return table

    def on(self, event: str, handler: Handler) -> Disposer:
        """Register handler for event. Returns a function that removes it."""
        handlers = self._handlers.setdefault(event, [])
        handlers.append(handler)

        def _unsubscribe() -> None:
            # Only the list this registration went into; off(event) drops it.
            if self._handlers.get(event) is not handlers:
                return
            try:
                handlers.remove(handler)
            except ValueError:
                pass  # already removed

        return _unsubscribe

    def off(self, event: str | None = None, handler: Handler | None = None) -> None:
        """Remove handlers.

        off()                -> every handler for every event
        off(event)           -> every handler for event
        off(event, handler)  -> every registration of handler for event
        off(None, handler)   -> every registration of handler, any event
        """
        if event is None and handler is None:
            self._handlers.clear()
            return
        events = [event] if event is not None else list(self._handlers)
        for name in events:
            if handler is None:
                self._handlers.pop(name, None)
                continue
            handlers = self._handlers.get(name)
            if handlers is None:
                continue
            # In place, so disposers of the surviving registrations stay valid.
            handlers[:] = [h for h in handlers if h != handler]
            if not handlers:
                self._handlers.pop(name, None)

    def trigger(self, event: str, *args) -> None:
        """Call every handler registered for event, in registration order."""
        handlers = self._handlers.get(event)
        if not handlers:
            return
        # Snapshot: handlers may subscribe or unsubscribe while we deliver.
        for handler in list(handlers):
            handler(*args)

    def handler_count(self, event: str) -> int:
        return len(self._handlers.get(event, ()))

    # Backbone-style names
    bind = on
    unbind = off

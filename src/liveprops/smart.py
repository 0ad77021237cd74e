"""Smart properties — get/set with change events and computed properties.

`set(name, value)` fires the event `"<name>Changed"` and then, depth-first,
the change event of every computed property that watches `name`, and of
everything watching those in turn. Handlers receive no arguments; they call
`get()` to read the new value.

There is no cycle guard on propagation. A computed property that ends up
watching itself recurses until RecursionError. Set `detect_cycles = True`
on the class to reject such tables at construction instead.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping

from liveprops._watchers import DependencyCycleError, build_watchers, find_cycle
from liveprops.events import Disposer, Events, Handler
from liveprops.prop import ComputedProperty

logger = logging.getLogger("liveprops.smart")

CHANGE_SUFFIX = "Changed"


def change_event(name: str) -> str:
    """Event key fired when property `name` changes."""
    return name + CHANGE_SUFFIX


class SmartProperties(Events):
    """Mixin: property table, dependency index and change notification.

    Classes mixing this in must call init_smart_properties() from __init__.
    """

    detect_cycles: bool = False

    def init_smart_properties(self, props: Mapping[str, Any] | None = None) -> None:
        self._props: dict[str, Any] = dict(props) if props else {}
        self._watchers: dict[str, list[str]] = build_watchers(self._props)
        if self.detect_cycles:
            cycle = find_cycle(self._watchers)
            if cycle is not None:
                raise DependencyCycleError(cycle)
        logger.debug(
            "%s: %d properties, %d watched names",
            type(self).__name__, len(self._props), len(self._watchers),
        )

    def get(self, name: str) -> Any:
        """Current value of `name`; computed properties run their getter."""
        value = self._props.get(name)
        if isinstance(value, ComputedProperty):
            return value.getter(self)
        return value

    def set(self, name: str, value: Any) -> None:
        """Write `name` and fire change events.

        Stored properties are overwritten without an equality check.
        Computed properties delegate to their setter; without one the write
        is dropped and nothing fires.
        """
        current = self._props.get(name)
        if isinstance(current, ComputedProperty):
            if current.setter is None:
                return
            current.setter(self, value)
        else:
            self._props[name] = value
        self._trigger_change(name)

    def notify(self, name: str) -> None:
        """Fire the change event for `name` and everything watching it."""
        self._trigger_change(name)

    def on_change(self, name: str, handler: Handler) -> Disposer:
        return self.on(change_event(name), handler)

    def dependents(self, name: str) -> list[str]:
        """Names of computed properties directly watching `name`."""
        return list(self._watchers.get(name, ()))

    def _trigger_change(self, name: str) -> None:
        self.trigger(change_event(name))
        for watcher in self._watchers.get(name, ()):
            self._trigger_change(watcher)


class LiveObject(SmartProperties):
    """Base class with smart properties wired up.

    Declare properties in `defaults`. Subclass defaults are merged over
    base-class defaults; the constructor's `props` and keyword overrides are
    merged over both.

    Usage:
        class Fruit(LiveObject):
            defaults = {
                "prop1": "apple",
                "prop2": prop(["prop1"], lambda self: "pine" + self.get("prop1")),
            }

        f = Fruit()
        f.get("prop2")    # "pineapple"
        f.set("prop1", "ap")
        f.get("prop2")    # "pineap"
    """

    defaults: dict[str, Any] = {}

    def __init__(self, props: Mapping[str, Any] | None = None, **overrides: Any) -> None:
        table: dict[str, Any] = {}
        for klass in reversed(type(self).__mro__):
            table.update(klass.__dict__.get("defaults", {}))
        if props:
            table.update(props)
        table.update(overrides)
        self.init_smart_properties(table)

    def keys(self) -> list[str]:
        return list(self._props)

    def __contains__(self, name: object) -> bool:
        return name in self._props

    def __iter__(self) -> Iterator[str]:
        return iter(self._props)

    def __repr__(self) -> str:
        parts = []
        for name, value in self._props.items():
            if isinstance(value, ComputedProperty):
                parts.append(f"{name}=<computed>")
            else:
                parts.append(f"{name}={value!r}")
        return f"{type(self).__name__}({', '.join(parts)})"

"""Two-way property binding between two smart-property objects.

bind_properties(a, "x", b, "y") makes a.x take b.y's current value, then keeps
the two equal: a change on either side is copied to the other. The copy is
skipped when the values are already identical, or equal and of the same
type, which is what stops the direct a <-> b loop. It does not stop loops
that go through computed properties.

Objects only need get(), set() and on(): LiveObject or anything shaped
like it.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from liveprops.smart import change_event

logger = logging.getLogger("liveprops.binding")


def _same(current: Any, new_value: Any) -> bool:
    # 0 == False and 1 == 1.0, but a bound pair must end up holding the same type.
    return current is new_value or (type(current) is type(new_value) and current == new_value)


def _make_update(target: Any, target_name: str, source: Any, source_name: str) -> Callable[[], None]:
    def _update() -> None:
        new_value = source.get(source_name)
        if not _same(target.get(target_name), new_value):
            target.set(target_name, new_value)

    return _update


class Binding:
    """Handle for a live binding. dispose() removes both subscriptions."""

    __slots__ = ("_disposers", "_label")

    def __init__(self, disposers: list[Callable[[], None]], label: str) -> None:
        self._disposers = disposers
        self._label = label

    @property
    def disposed(self) -> bool:
        return not self._disposers

    def dispose(self) -> None:
        if not self._disposers:
            return
        for d in self._disposers:
            d()
        self._disposers = []
        logger.debug("Unbound %s", self._label)

    def __repr__(self) -> str:
        state = "disposed" if self.disposed else "active"
        return f"Binding({self._label}, {state})"


def bind_properties(obj_a: Any, name_a: str, obj_b: Any, name_b: str) -> Binding:
    """Keep obj_a's name_a and obj_b's name_b equal.

    On bind, obj_a adopts obj_b's value. Afterwards changes flow both ways.
    If name_a is a read-only computed property the initial write is dropped:
    the two sides differ until name_a changes, and obj_b only follows obj_a.

    Usage:
        slider = LiveObject(value=10)
        model = LiveObject(volume=3)
        binding = bind_properties(slider, "value", model, "volume")
        slider.get("value")    # 3
        slider.set("value", 7)
        model.get("volume")    # 7
        binding.dispose()
    """
    update_a = _make_update(obj_a, name_a, obj_b, name_b)
    update_b = _make_update(obj_b, name_b, obj_a, name_a)
    disposers = [
        obj_a.on(change_event(name_a), update_b),
        obj_b.on(change_event(name_b), update_a),
    ]
    label = f"{type(obj_a).__name__}.{name_a} <-> {type(obj_b).__name__}.{name_b}"
    logger.debug("Bound %s", label)
    update_a()
    return Binding(disposers, label)

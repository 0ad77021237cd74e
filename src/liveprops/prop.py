"""Computed properties — values derived from other properties of the same object.

A ComputedProperty is declared in a LiveObject's property table next to plain
values. It names the properties it watches; whenever one of those changes,
the object fires a change event for the computed property too.

The getter is called as getter(obj) on every read; nothing is cached.
The optional setter is called as setter(obj, value) and is responsible for
storing whatever it needs, usually by calling obj.set() on other properties.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

Getter = Callable[[Any], Any]
Setter = Callable[[Any, Any], None]


class ComputedProperty:
    """A derived property: watched names, a getter and an optional setter."""

    __slots__ = ("watches", "getter", "setter")

    def __init__(
        self,
        watches: Iterable[str],
        getter: Getter,
        setter: Setter | None = None,
    ) -> None:
        if not callable(getter):
            raise TypeError(f"getter must be callable, got {getter!r}")
        if setter is not None and not callable(setter):
            raise TypeError(f"setter must be callable or None, got {setter!r}")
        self.watches: tuple[str, ...] = tuple(watches)
        self.getter = getter
        self.setter = setter

    @property
    def read_only(self) -> bool:
        return self.setter is None

    def setter_fn(self, setter: Setter) -> ComputedProperty:
        """Attach a setter, property.setter style. Returns self."""
        if not callable(setter):
            raise TypeError(f"setter must be callable, got {setter!r}")
        self.setter = setter
        return self

    def __repr__(self) -> str:
        name = getattr(self.getter, "__name__", "getter")
        mode = "ro" if self.read_only else "rw"
        return f"ComputedProperty({name}, watches={list(self.watches)!r}, {mode})"


def prop(
    watches: Iterable[str],
    getter: Getter,
    setter: Setter | None = None,
) -> ComputedProperty:
    """Declare a computed property.

    `watches` is required but may be empty. `getter` is required.
    `setter` is optional; without it the property is read-only and writes
    to it are silently dropped.

    Usage:
        class Fruit(LiveObject):
            defaults = {
                "prop1": "apple",
                "prop2": prop(["prop1"], lambda self: "pine" + self.get("prop1")),
            }
    """
    return ComputedProperty(watches, getter, setter)


def computed(*watches: str) -> Callable[[Getter], ComputedProperty]:
    """Decorator form of prop().

    Usage:
        @computed("first", "last")
        def full_name(self):
            return f"{self.get('first')} {self.get('last')}"

        @full_name.setter_fn
        def full_name(self, value):
            first, _, last = value.partition(" ")
            self.set("first", first)
            self.set("last", last)

        class Person(LiveObject):
            defaults = {"first": "Ada", "last": "Lovelace", "full_name": full_name}
    """

    def decorator(getter: Getter) -> ComputedProperty:
        return ComputedProperty(watches, getter)

    return decorator


def is_computed(value: object) -> bool:
    return isinstance(value, ComputedProperty)

"""Dependency index — which computed properties watch which names.

The index maps a property name to the computed properties that must be
re-notified when it changes. It is built once from the fully-resolved
property table and never modified afterwards.
"""

from __future__ import annotations

from typing import Mapping

from liveprops.prop import ComputedProperty


class DependencyCycleError(RuntimeError):
    """Computed properties watch each other in a loop."""

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = cycle
        super().__init__("dependency cycle: " + " -> ".join(cycle))


def build_watchers(props: Mapping[str, object]) -> dict[str, list[str]]:
    """Reverse map: watched name -> names of computed properties watching it."""
    watchers: dict[str, list[str]] = {}
    for name, value in props.items():
        if isinstance(value, ComputedProperty):
            for watched in value.watches:
                watchers.setdefault(watched, []).append(name)
    return watchers


def find_cycle(watchers: Mapping[str, list[str]]) -> list[str] | None:
    """Return one cycle as a path (first == last), or None.

    Iterative DFS with white/grey/black colouring so deep chains don't hit
    the recursion limit.
    """
    WHITE, GREY, BLACK = 0, 1, 2
    colour: dict[str, int] = {}

    for root in watchers:
        if colour.get(root, WHITE) != WHITE:
            continue
        path: list[str] = [root]
        stack = [iter(watchers.get(root, ()))]
        colour[root] = GREY
        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
                colour[path.pop()] = BLACK
                continue
            state = colour.get(child, WHITE)
            if state == GREY:
                return path[path.index(child):] + [child]
            if state == WHITE:
                colour[child] = GREY
                path.append(child)
                stack.append(iter(watchers.get(child, ())))
    return None

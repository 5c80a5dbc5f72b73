"""Components and the keyed component-local state store.

A component is a view function plus, optionally, a small slice of local state
identified by a stable path (e.g. "app/detail_panel"). The slices live in a
ComponentStore that is itself part of the application State, so they change
only through the reducer and every snapshot stays whole.

// [LAW:one-source-of-truth] A concern is owned either by a global State
//   section or by a component slice, never both.
// [LAW:no-shared-mutable-globals] ComponentStore is immutable; with_state()
//   returns a new store sharing the untouched entries.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from termdash.core.effect import NONE, Effect
from termdash.core.element import Element


class ComponentStore:
    """Immutable map of component path -> local state value."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, object] | None = None):
        self._entries = MappingProxyType(dict(entries or {}))

    def get(self, path: str, default=None):
        return self._entries.get(path, default)

    def with_state(self, path: str, state: object) -> "ComponentStore":
        return ComponentStore({**self._entries, path: state})

    def without(self, path: str) -> "ComponentStore":
        if path not in self._entries:
            return self
        return ComponentStore({k: v for k, v in self._entries.items() if k != path})

    def paths(self) -> tuple[str, ...]:
        return tuple(sorted(self._entries))

    def items(self):
        return self._entries.items()

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComponentStore):
            return NotImplemented
        return dict(self._entries) == dict(other._entries)

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        return f"ComponentStore({dict(self._entries)!r})"


class Component:
    """Base class for views.

    Subclasses override view(); stateful ones also set `path` and override
    init() and update(). update() must be pure, like a reducer.
    """

    path: str = ""

    def init(self):
        """Initial local state; used until the reducer stores a slice."""
        return None

    def update(self, local, message) -> tuple[object, Effect]:
        return local, NONE

    def view(self, props, local) -> Element:
        raise NotImplementedError

    def local_state(self, store: ComponentStore):
        # Reads never insert: building a tree must not change State.
        if self.path and self.path in store:
            return store.get(self.path)
        return self.init()

    def render(self, props, store: ComponentStore | None = None) -> Element:
        local = self.local_state(store) if store is not None else self.init()
        return self.view(props, local)

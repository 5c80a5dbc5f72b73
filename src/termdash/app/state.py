"""Application State: one immutable snapshot, split into sections.

// [LAW:one-source-of-truth] Canonical owners:
//   selection (feed, settings) -> UiState
//   panel stack, tab, focus, help -> NavigationState
//   detail panel scroll offset -> component store ("app/detail_panel")
// [LAW:no-shared-mutable-globals] Sections are frozen; transitions use
//   dataclasses.replace and share every untouched section.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from termdash.app.model import Entry, EntryDetail
from termdash.app.types import Panel, Tab
from termdash.core.component import ComponentStore
from termdash.io.settings import Config

ENTRIES_KEY = "entries"
DEFAULT_STATUS = "Press ? for help"

_EMPTY: Mapping = MappingProxyType({})


def detail_key(entry_id: str) -> str:
    return f"detail:{entry_id}"


def frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


def with_item(mapping: Mapping, key, value) -> Mapping:
    return MappingProxyType({**mapping, key: value})


def without_item(mapping: Mapping, key) -> Mapping:
    if key not in mapping:
        return mapping
    return MappingProxyType({k: v for k, v in mapping.items() if k != key})


def clamp_index(index: int | None, length: int) -> int | None:
    """None when the collection is empty, else index pinned to [0, length)."""
    if length <= 0 or index is None:
        return None
    return max(0, min(index, length - 1))


@dataclass(frozen=True)
class NavigationState:
    tab: Tab = Tab.FEED
    panels: tuple[Panel, ...] = ()
    content_focused: bool = False
    help_open: bool = False

    @property
    def top_panel(self) -> Panel | None:
        return self.panels[-1] if self.panels else None


@dataclass(frozen=True)
class DataState:
    entries: tuple[Entry, ...] = ()
    loaded: bool = False
    details: Mapping[str, EntryDetail] = field(default_factory=lambda: _EMPTY)
    loading: frozenset[str] = frozenset()
    errors: Mapping[str, str] = field(default_factory=lambda: _EMPTY)
    next_request_id: int = 1
    # key (ENTRIES_KEY or detail_key(id)) -> id of the request whose answer we accept
    pending: Mapping[str, int] = field(default_factory=lambda: _EMPTY)

    def is_loading(self, key: str) -> bool:
        return key in self.loading

    def entry(self, entry_id: str) -> Entry | None:
        return next((e for e in self.entries if e.id == entry_id), None)


@dataclass(frozen=True)
class UiState:
    feed_selected: int | None = None
    settings_selected: int | None = 0


@dataclass(frozen=True)
class SystemState:
    config: Config = field(default_factory=Config)
    now: float = 0.0
    last_refresh: float | None = None
    status: str = DEFAULT_STATUS
    status_is_error: bool = False
    width: int = 80
    height: int = 24
    should_quit: bool = False

    def with_status(self, message: str, *, is_error: bool = False) -> "SystemState":
        return replace(self, status=message, status_is_error=is_error)


@dataclass(frozen=True)
class AppState:
    navigation: NavigationState = field(default_factory=NavigationState)
    data: DataState = field(default_factory=DataState)
    ui: UiState = field(default_factory=UiState)
    system: SystemState = field(default_factory=SystemState)
    components: ComponentStore = field(default_factory=ComponentStore)


def initial_state(config: Config | None = None, *, width: int = 80, height: int = 24) -> AppState:
    return AppState(system=SystemState(config=config or Config(), width=width, height=height))

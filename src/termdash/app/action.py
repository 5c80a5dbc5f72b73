"""Actions: immutable descriptions of things that happened.

// [LAW:one-source-of-truth] ACTION_TYPES is the closed set of actions; the
//   reducer registry is checked against it.

Every action is a frozen dataclass. Payload-free actions are still classes
(compare by type) so dispatch tables can key on them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from termdash.app.model import Entry, EntryDetail
from termdash.app.types import Panel, Tab


@dataclass(frozen=True)
class Action:
    pass


# Navigation

@dataclass(frozen=True)
class NavigateTab(Action):
    tab: Tab


@dataclass(frozen=True)
class NavigateTabLeft(Action):
    pass


@dataclass(frozen=True)
class NavigateTabRight(Action):
    pass


@dataclass(frozen=True)
class EnterContentFocus(Action):
    pass


@dataclass(frozen=True)
class ExitContentFocus(Action):
    pass


@dataclass(frozen=True)
class NavigateUp(Action):
    """Back out one level: close help, pop a panel, or leave content focus."""


# Panels

@dataclass(frozen=True)
class PushPanel(Action):
    panel: Panel


@dataclass(frozen=True)
class PopPanel(Action):
    pass


# Selection

@dataclass(frozen=True)
class SelectNext(Action):
    pass


@dataclass(frozen=True)
class SelectPrevious(Action):
    pass


@dataclass(frozen=True)
class SelectIndex(Action):
    index: int


@dataclass(frozen=True)
class SelectFirst(Action):
    pass


@dataclass(frozen=True)
class SelectLast(Action):
    pass


@dataclass(frozen=True)
class ActivateSelection(Action):
    pass


# Data

@dataclass(frozen=True)
class RefreshData(Action):
    pass


@dataclass(frozen=True)
class EntriesLoaded(Action):
    request_id: int
    entries: tuple[Entry, ...] | None = None
    error: str | None = None


@dataclass(frozen=True)
class DetailLoaded(Action):
    entry_id: str
    request_id: int
    detail: EntryDetail | None = None
    error: str | None = None


# Settings

@dataclass(frozen=True)
class ToggleSetting(Action):
    key: str


@dataclass(frozen=True)
class AdjustSetting(Action):
    key: str
    delta: int


@dataclass(frozen=True)
class ConfigSaved(Action):
    path: str = ""
    error: str | None = None


# Components

@dataclass(frozen=True)
class ComponentMessage(Action):
    path: str
    message: object = field(default=None)


# System

@dataclass(frozen=True)
class Tick(Action):
    now: float


@dataclass(frozen=True)
class Resize(Action):
    width: int
    height: int


@dataclass(frozen=True)
class SetStatus(Action):
    message: str
    is_error: bool = False


@dataclass(frozen=True)
class EffectFailed(Action):
    request: object
    error: str


@dataclass(frozen=True)
class ToggleHelp(Action):
    pass


@dataclass(frozen=True)
class Quit(Action):
    pass


ACTION_TYPES: tuple[type[Action], ...] = (
    NavigateTab,
    NavigateTabLeft,
    NavigateTabRight,
    EnterContentFocus,
    ExitContentFocus,
    NavigateUp,
    PushPanel,
    PopPanel,
    SelectNext,
    SelectPrevious,
    SelectIndex,
    SelectFirst,
    SelectLast,
    ActivateSelection,
    RefreshData,
    EntriesLoaded,
    DetailLoaded,
    ToggleSetting,
    AdjustSetting,
    ConfigSaved,
    ComponentMessage,
    Tick,
    Resize,
    SetStatus,
    EffectFailed,
    ToggleHelp,
    Quit,
)

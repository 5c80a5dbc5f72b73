"""Small shared enums and value types for the dashboard."""

from dataclasses import dataclass
from enum import Enum


class Tab(Enum):
    FEED = "feed"
    STATS = "stats"
    SETTINGS = "settings"

    @property
    def label(self) -> str:
        return _TAB_LABELS[self]

    def next(self) -> "Tab":
        order = list(Tab)
        return order[(order.index(self) + 1) % len(order)]

    def previous(self) -> "Tab":
        order = list(Tab)
        return order[(order.index(self) - 1) % len(order)]


_TAB_LABELS = {
    Tab.FEED: "Feed",
    Tab.STATS: "Stats",
    Tab.SETTINGS: "Settings",
}


@dataclass(frozen=True)
class Panel:
    """Base class for documents stacked over a tab."""

    @property
    def title(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class EntryPanel(Panel):
    entry_id: str

    @property
    def title(self) -> str:
        return f"Entry {self.entry_id}"


class SettingKind(Enum):
    BOOL = "bool"
    INT = "int"


@dataclass(frozen=True)
class SettingRow:
    key: str
    label: str
    kind: SettingKind
    step: int = 0
    minimum: int = 0
    maximum: int = 0


# [LAW:one-source-of-truth] Rows shown on the Settings tab, in display order.
SETTING_ROWS: tuple[SettingRow, ...] = (
    SettingRow("refresh_interval", "Refresh interval (s)", SettingKind.INT, step=5, minimum=5, maximum=3600),
    SettingRow("show_stale", "Mark stale entries", SettingKind.BOOL),
    SettingRow("compact_list", "Compact feed rows", SettingKind.BOOL),
)


def setting_row(key: str) -> SettingRow | None:
    return next((row for row in SETTING_ROWS if row.key == key), None)

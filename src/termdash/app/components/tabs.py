"""Tab contents: the entry feed, aggregate stats, and the settings list."""

from collections import Counter

from termdash.app.model import Entry
from termdash.app.state import ENTRIES_KEY, AppState
from termdash.app.theme import Theme
from termdash.app.types import SETTING_ROWS, SettingKind, SettingRow
from termdash.app.widgets import ListView, Paragraph, Rule, Table
from termdash.core.component import Component
from termdash.core.element import Element, leaf, vertical
from termdash.core.layout import Fixed, Min
from termdash.io.settings import Config


def _value(entry: Entry) -> str:
    return "-" if entry.value is None else f"{entry.value:,.2f}"


def feed_row(entry: Entry, config: Config) -> str:
    marker = "!" if config.show_stale and entry.is_stale else " "
    if config.compact_list:
        return f"{marker} {entry.title}"
    return f"{marker} {entry.id:<6} {entry.title:<32} {entry.status:<6} {_value(entry):>10}"


class FeedTab(Component):
    def header(self, state: AppState) -> str:
        data = state.data
        text = f" Entries ({len(data.entries)})"
        if data.is_loading(ENTRIES_KEY):
            text += "  loading…"
        elif ENTRIES_KEY in data.errors:
            text += f"  last refresh failed: {data.errors[ENTRIES_KEY]}"
        return text

    def view(self, props: tuple[AppState, Theme], local) -> Element:
        state, theme = props
        config = state.system.config
        focused = state.navigation.content_focused
        if state.data.loaded:
            empty = "No entries."
        elif state.data.is_loading(ENTRIES_KEY):
            empty = "Loading…"
        else:
            empty = "Nothing loaded yet. Press r to refresh."
        entries = ListView(
            rows=tuple(feed_row(entry, config) for entry in state.data.entries),
            selected=state.ui.feed_selected,
            highlight=theme.selected if focused else theme.muted + theme.selected,
            empty_text=empty,
            empty_style=theme.muted,
        )
        return vertical([Fixed(1), Min(0)], [leaf(Paragraph((self.header(state),), theme.accent)), leaf(entries)])


def summarize(entries: tuple[Entry, ...]) -> tuple[str, ...]:
    values = [e.value for e in entries if e.value is not None]
    if not values:
        return (f"Entries: {len(entries)}", "Values: none")
    mean = sum(values) / len(values)
    return (
        f"Entries: {len(entries)}",
        f"Mean value: {mean:,.2f}",
        f"Range: {min(values):,.2f} .. {max(values):,.2f}",
    )


def status_rows(entries: tuple[Entry, ...]) -> tuple[tuple[str, ...], ...]:
    counts = Counter(entry.status or "(none)" for entry in entries)
    total = len(entries)
    return tuple(
        (status, str(count), f"{100 * count / total:.0f}%")
        for status, count in sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    )


class StatsTab(Component):
    def view(self, props: tuple[AppState, Theme], local) -> Element:
        state, theme = props
        entries = state.data.entries
        summary = summarize(entries)
        table = Table(("status", "count", "share"), status_rows(entries), header_style=theme.accent)
        return vertical(
            [Fixed(len(summary)), Fixed(1), Min(0)],
            [leaf(Paragraph(summary)), leaf(Rule(style=theme.muted)), leaf(table)],
        )


def setting_value(row: SettingRow, config: Config) -> str:
    value = getattr(config, row.key)
    if row.kind is SettingKind.BOOL:
        return "[x]" if value else "[ ]"
    return f"< {value} >"


class SettingsTab(Component):
    def view(self, props: tuple[AppState, Theme], local) -> Element:
        state, theme = props
        config = state.system.config
        width = max(len(row.label) for row in SETTING_ROWS)
        rows = tuple(f" {row.label.ljust(width)}  {setting_value(row, config)}" for row in SETTING_ROWS)
        focused = state.navigation.content_focused
        listing = ListView(
            rows=rows,
            selected=state.ui.settings_selected,
            highlight=theme.selected if focused else theme.muted + theme.selected,
        )
        hint = Paragraph((" enter/space toggles, ←/→ adjusts",), theme.muted)
        return vertical([Min(0), Fixed(1)], [leaf(listing), leaf(hint)])

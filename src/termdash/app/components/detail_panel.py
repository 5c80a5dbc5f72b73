"""Entry detail document, shown when an EntryPanel is on top of the stack.

The scroll offset is this component's local state, stored under DETAIL_PATH
in the component store and changed only through ComponentMessage. Offsets
are clamped to the first line of the last full page, so every stored value
is a position the view actually shows.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from termdash.app.components.chrome import STATUS_ROWS, TAB_BAR_ROWS
from termdash.app.state import AppState, detail_key
from termdash.app.theme import Theme
from termdash.app.types import EntryPanel
from termdash.app.widgets import Breadcrumb, Paragraph, Rule
from termdash.core.component import Component
from termdash.core.effect import NONE
from termdash.core.element import Element, leaf, vertical
from termdash.core.layout import Fixed, Min

DETAIL_PATH = "app/detail_panel"

# Breadcrumb plus rule above the body.
HEADER_ROWS = 2


@dataclass(frozen=True)
class DetailScroll:
    offset: int = 0


@dataclass(frozen=True)
class ScrollBy:
    delta: int
    limit: int


@dataclass(frozen=True)
class ScrollTo:
    offset: int
    limit: int


def _clamp(offset: int, limit: int) -> int:
    return max(0, min(offset, max(0, limit)))


def detail_lines(state: AppState, panel: EntryPanel) -> tuple[str, ...]:
    data = state.data
    detail = data.details.get(panel.entry_id)
    if detail is not None:
        return detail.lines()
    key = detail_key(panel.entry_id)
    if data.is_loading(key):
        return ("Loading…",)
    if key in data.errors:
        return (f"Could not load {panel.entry_id}: {data.errors[key]}",)
    return (f"No detail for {panel.entry_id}",)


def body_height(state: AppState) -> int:
    """Rows available to the detail text at the current terminal height."""
    return max(0, state.system.height - TAB_BAR_ROWS - STATUS_ROWS - HEADER_ROWS)


def scroll_limit(state: AppState, panel: EntryPanel) -> int:
    """Largest offset that still changes what is on screen."""
    return max(0, len(detail_lines(state, panel)) - body_height(state))


def breadcrumb_trail(state: AppState) -> tuple[str, ...]:
    nav = state.navigation
    return (nav.tab.label,) + tuple(panel.title for panel in nav.panels)


class DetailPanel(Component):
    path = DETAIL_PATH

    def init(self) -> DetailScroll:
        return DetailScroll()

    def update(self, local: DetailScroll, message):
        if not isinstance(local, DetailScroll):
            local = self.init()
        if isinstance(message, ScrollBy):
            # Start from the shown position; a resize may have shrunk the limit.
            current = _clamp(local.offset, message.limit)
            return replace(local, offset=_clamp(current + message.delta, message.limit)), NONE
        if isinstance(message, ScrollTo):
            return replace(local, offset=_clamp(message.offset, message.limit)), NONE
        return local, NONE

    def view(self, props: tuple[AppState, EntryPanel, Theme], local: DetailScroll) -> Element:
        state, panel, theme = props
        header = Breadcrumb(
            breadcrumb_trail(state),
            hint="(esc to close)",
            style=theme.muted,
            label_style=theme.accent,
        )
        body = Paragraph(detail_lines(state, panel), offset=local.offset)
        return vertical(
            [Fixed(1), Fixed(1), Min(0)],
            [leaf(header), leaf(Rule(style=theme.muted)), leaf(body)],
        )

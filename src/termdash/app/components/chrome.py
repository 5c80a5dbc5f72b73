"""Tab bar, status line, and the help overlay."""

from termdash.app.keys import HELP_LINES
from termdash.app.state import ENTRIES_KEY, AppState
from termdash.app.theme import Theme
from termdash.app.types import Tab
from termdash.app.widgets import Modal, StatusBar, TabBar
from termdash.core.component import Component
from termdash.core.element import Element, leaf

TABS: tuple[Tab, ...] = tuple(Tab)

# Rows the root layout reserves above and below the content area.
TAB_BAR_ROWS = 1
STATUS_ROWS = 1


class TabBarView(Component):
    def view(self, props: tuple[AppState, Theme], local) -> Element:
        state, theme = props
        nav = state.navigation
        return leaf(TabBar(
            labels=tuple(tab.label for tab in TABS),
            active=TABS.index(nav.tab),
            focused=not nav.content_focused and not nav.panels,
            style=theme.status,
            active_style=theme.accent + theme.selected,
        ))


def refresh_hint(state: AppState) -> str:
    system = state.system
    if state.data.is_loading(ENTRIES_KEY):
        return "loading…"
    if system.last_refresh is None:
        return ""
    remaining = int(system.config.refresh_interval - (system.now - system.last_refresh))
    return f"refresh in {max(0, remaining)}s"


class StatusLine(Component):
    def view(self, props: tuple[AppState, Theme], local) -> Element:
        state, theme = props
        return leaf(StatusBar(
            left=state.system.status,
            right=refresh_hint(state),
            is_error=state.system.status_is_error,
            style=theme.status,
            error_style=theme.status + theme.error,
        ))


class HelpOverlay(Component):
    def view(self, props: Theme, local) -> Element:
        return leaf(Modal("Keys", HELP_LINES, border_style=props.border))

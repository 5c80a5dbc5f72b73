"""Root view: tab bar, current tab or top panel, status line, help overlay."""

from termdash.app.components import COMPONENTS
from termdash.app.components.chrome import STATUS_ROWS, TAB_BAR_ROWS, HelpOverlay, StatusLine, TabBarView
from termdash.app.components.detail_panel import DETAIL_PATH
from termdash.app.components.tabs import FeedTab, SettingsTab, StatsTab
from termdash.app.state import AppState
from termdash.app.theme import Theme, build_theme
from termdash.app.types import EntryPanel, Tab
from termdash.core.component import Component
from termdash.core.element import EMPTY, Element, overlay, vertical
from termdash.core.layout import Fixed, Min

TAB_VIEWS: dict[Tab, Component] = {
    Tab.FEED: FeedTab(),
    Tab.STATS: StatsTab(),
    Tab.SETTINGS: SettingsTab(),
}


class App(Component):
    def __init__(self):
        self.tab_bar = TabBarView()
        self.status = StatusLine()
        self.help = HelpOverlay()

    def content(self, state: AppState, theme: Theme) -> Element:
        panel = state.navigation.top_panel
        if isinstance(panel, EntryPanel):
            return COMPONENTS[DETAIL_PATH].render((state, panel, theme), state.components)
        return TAB_VIEWS[state.navigation.tab].render((state, theme), state.components)

    def view(self, props: AppState, local) -> Element:
        state = props
        theme = build_theme(state.system.config.colors)
        body = vertical(
            [Fixed(TAB_BAR_ROWS), Min(0), Fixed(STATUS_ROWS)],
            [
                self.tab_bar.render((state, theme)),
                self.content(state, theme),
                self.status.render((state, theme)),
            ],
        )
        top = self.help.render(theme) if state.navigation.help_open else EMPTY
        return overlay(body, top)


ROOT = App()


def build_view(state: AppState) -> Element:
    """Root view function handed to the Runtime."""
    return ROOT.render(state, state.components)

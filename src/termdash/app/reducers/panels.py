"""Panel (document) stack over the current tab."""

from dataclasses import replace

from termdash.app.action import PopPanel, PushPanel
from termdash.app.components.detail_panel import DETAIL_PATH
from termdash.app.effects import FetchDetail
from termdash.app.reducers import SubReducer
from termdash.app.reducers.data_loading import begin_request
from termdash.app.state import AppState, detail_key
from termdash.app.types import EntryPanel, Panel
from termdash.core.effect import NONE, Async


def _push(state: AppState, action: PushPanel):
    panel = action.panel
    if not isinstance(panel, Panel) or state.navigation.top_panel == panel:
        return state, NONE
    navigation = replace(state.navigation, panels=state.navigation.panels + (panel,), content_focused=True)
    # A freshly opened document starts scrolled to the top.
    state = replace(state, navigation=navigation, components=state.components.without(DETAIL_PATH))

    if not isinstance(panel, EntryPanel):
        return state, NONE
    key = detail_key(panel.entry_id)
    if panel.entry_id in state.data.details or state.data.is_loading(key):
        return state, NONE
    data, request_id = begin_request(state.data, key)
    return replace(state, data=data), Async(FetchDetail(panel.entry_id, request_id))


def _pop(state: AppState, action: PopPanel):
    if not state.navigation.panels:
        return state, NONE
    navigation = replace(state.navigation, panels=state.navigation.panels[:-1])
    return replace(state, navigation=navigation), NONE


HANDLERS = {
    PushPanel: _push,
    PopPanel: _pop,
}

reducer = SubReducer("panels", HANDLERS)

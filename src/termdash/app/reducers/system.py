"""Clock, terminal size, status line, and quitting."""

from dataclasses import replace

from termdash.app.action import Quit, RefreshData, Resize, SetStatus, Tick
from termdash.app.reducers import SubReducer
from termdash.app.state import ENTRIES_KEY, AppState
from termdash.core.effect import NONE, Dispatch


def refresh_due(state: AppState) -> bool:
    system = state.system
    if state.data.is_loading(ENTRIES_KEY):
        return False
    if system.last_refresh is None:
        return True
    return system.now - system.last_refresh >= system.config.refresh_interval


def _tick(state: AppState, action: Tick):
    state = replace(state, system=replace(state.system, now=action.now))
    return state, Dispatch(RefreshData()) if refresh_due(state) else NONE


def _resize(state: AppState, action: Resize):
    width, height = max(0, action.width), max(0, action.height)
    if (width, height) == (state.system.width, state.system.height):
        return state, NONE
    return replace(state, system=replace(state.system, width=width, height=height)), NONE


def _set_status(state: AppState, action: SetStatus):
    return replace(state, system=state.system.with_status(action.message, is_error=action.is_error)), NONE


def _quit(state: AppState, action: Quit):
    return replace(state, system=replace(state.system, should_quit=True)), NONE


HANDLERS = {
    Tick: _tick,
    Resize: _resize,
    SetStatus: _set_status,
    Quit: _quit,
}

reducer = SubReducer("system", HANDLERS)

"""Data loading: refresh requests and their responses.

Every outgoing request gets a fresh id recorded in DataState.pending under
its key; a response is accepted only if its id is still the pending one, so
superseded and late answers are ignored.
"""

import logging
from dataclasses import replace

from termdash.app.action import DetailLoaded, EffectFailed, EntriesLoaded, RefreshData
from termdash.app.effects import FetchDetail, FetchEntries
from termdash.app.reducers import SubReducer
from termdash.app.state import (
    ENTRIES_KEY,
    AppState,
    DataState,
    clamp_index,
    detail_key,
    with_item,
    without_item,
)
from termdash.core.effect import NONE, Async

logger = logging.getLogger(__name__)


def begin_request(data: DataState, key: str) -> tuple[DataState, int]:
    """Mark key as loading under a new request id."""
    request_id = data.next_request_id
    data = replace(
        data,
        next_request_id=request_id + 1,
        loading=data.loading | {key},
        pending=with_item(data.pending, key, request_id),
    )
    return data, request_id


def finish_request(data: DataState, key: str, error: str | None) -> DataState:
    errors = with_item(data.errors, key, error) if error else without_item(data.errors, key)
    return replace(
        data,
        loading=data.loading - {key},
        pending=without_item(data.pending, key),
        errors=errors,
    )


def is_current(data: DataState, key: str, request_id: int) -> bool:
    return data.pending.get(key) == request_id


def _refresh(state: AppState, action: RefreshData):
    # A refresh while one is loading supersedes it.
    data, request_id = begin_request(state.data, ENTRIES_KEY)
    system = replace(state.system, last_refresh=state.system.now).with_status("Refreshing…")
    return replace(state, data=data, system=system), Async(FetchEntries(request_id))


def _reselect(old_entries, new_entries, selected: int | None) -> int | None:
    """Keep the selected entry selected by id; otherwise keep the position."""
    if selected is not None and 0 <= selected < len(old_entries):
        selected_id = old_entries[selected].id
        for index, entry in enumerate(new_entries):
            if entry.id == selected_id:
                return index
    return clamp_index(selected, len(new_entries))


def _entries_loaded(state: AppState, action: EntriesLoaded):
    if not is_current(state.data, ENTRIES_KEY, action.request_id):
        logger.debug("ignoring stale entries response %d", action.request_id)
        return state, NONE

    if action.error is not None or action.entries is None:
        message = action.error or "no entries returned"
        data = finish_request(state.data, ENTRIES_KEY, message)
        system = state.system.with_status(f"Load failed: {message}", is_error=True)
        return replace(state, data=data, system=system), NONE

    entries = tuple(action.entries)
    data = replace(finish_request(state.data, ENTRIES_KEY, None), entries=entries, loaded=True)
    ui = replace(state.ui, feed_selected=_reselect(state.data.entries, entries, state.ui.feed_selected))
    system = state.system.with_status(f"Loaded {len(entries)} entries")
    return replace(state, data=data, ui=ui, system=system), NONE


def _detail_loaded(state: AppState, action: DetailLoaded):
    key = detail_key(action.entry_id)
    if not is_current(state.data, key, action.request_id):
        logger.debug("ignoring stale detail response %s/%d", action.entry_id, action.request_id)
        return state, NONE

    if action.error is not None or action.detail is None:
        message = action.error or "no detail returned"
        data = finish_request(state.data, key, message)
        system = state.system.with_status(f"Detail for {action.entry_id} failed: {message}", is_error=True)
        return replace(state, data=data, system=system), NONE

    data = finish_request(state.data, key, None)
    data = replace(data, details=with_item(data.details, action.entry_id, action.detail))
    return replace(state, data=data), NONE


def _effect_failed(state: AppState, action: EffectFailed):
    request = action.request
    data = state.data
    if isinstance(request, FetchEntries) and is_current(data, ENTRIES_KEY, request.request_id):
        data = finish_request(data, ENTRIES_KEY, action.error)
    elif isinstance(request, FetchDetail) and is_current(data, detail_key(request.entry_id), request.request_id):
        data = finish_request(data, detail_key(request.entry_id), action.error)
    system = state.system.with_status(f"Background task failed: {action.error}", is_error=True)
    return replace(state, data=data, system=system), NONE


HANDLERS = {
    RefreshData: _refresh,
    EntriesLoaded: _entries_loaded,
    DetailLoaded: _detail_loaded,
    EffectFailed: _effect_failed,
}

reducer = SubReducer("data_loading", HANDLERS)

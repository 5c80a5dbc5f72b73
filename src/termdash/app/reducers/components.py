"""Routes ComponentMessage to the owning component's update()."""

import logging
from dataclasses import replace

from termdash.app.action import ComponentMessage
from termdash.app.components import COMPONENTS
from termdash.app.reducers import SubReducer
from termdash.app.state import AppState
from termdash.core.effect import NONE

logger = logging.getLogger(__name__)


def _component_message(state: AppState, action: ComponentMessage):
    component = COMPONENTS.get(action.path)
    if component is None:
        logger.debug("no component at %r; dropping %r", action.path, action.message)
        return state, NONE
    local = component.local_state(state.components)
    new_local, effect = component.update(local, action.message)
    if new_local == local and action.path in state.components:
        return state, effect
    return replace(state, components=state.components.with_state(action.path, new_local)), effect


HANDLERS = {
    ComponentMessage: _component_message,
}

reducer = SubReducer("components", HANDLERS)

"""Root reducer: offers each action to the sub-reducers in order.

// [LAW:single-enforcer] reduce() is the only State transition function.

Sub-reducers decline with None. The first to claim an action produces the
result; an action nobody claims leaves State untouched with no effect.
Every class in ACTION_TYPES is claimed by exactly one sub-reducer
(see claim_table()).
"""

import logging

from termdash.app.action import ACTION_TYPES
from termdash.app.reducers import SubReducer
from termdash.app.reducers import components as components_reducer
from termdash.app.reducers import data_loading, navigation, panels, selection, settings, system
from termdash.core.effect import NONE, Effect

logger = logging.getLogger(__name__)

SUB_REDUCERS: tuple[SubReducer, ...] = (
    navigation.reducer,
    panels.reducer,
    selection.reducer,
    data_loading.reducer,
    settings.reducer,
    system.reducer,
    components_reducer.reducer,
)


def reduce(state, action) -> tuple[object, Effect]:
    for sub in SUB_REDUCERS:
        result = sub(state, action)
        if result is not None:
            return result
    logger.debug("unclaimed action %r", action)
    return state, NONE


def claim_table(sub_reducers=SUB_REDUCERS) -> dict[type, list[str]]:
    """Map each known action class to the names of the sub-reducers claiming it."""
    return {
        action_type: [sub.name for sub in sub_reducers if action_type in sub.handles]
        for action_type in ACTION_TYPES
    }

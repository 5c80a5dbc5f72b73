"""Settings tab edits. Every accepted change is persisted via Async(SaveConfig)."""

import logging
from dataclasses import replace

from termdash.app.action import AdjustSetting, ConfigSaved, ToggleSetting
from termdash.app.effects import SaveConfig
from termdash.app.reducers import SubReducer
from termdash.app.state import AppState
from termdash.app.types import SettingKind, setting_row
from termdash.core.effect import NONE, Async
from termdash.io.settings import Config

logger = logging.getLogger(__name__)


def _apply(state: AppState, config: Config):
    if config == state.system.config:
        return state, NONE
    system = replace(state.system, config=config).with_status("Saving settings…")
    return replace(state, system=system), Async(SaveConfig(config))


def _toggle(state: AppState, action: ToggleSetting):
    row = setting_row(action.key)
    if row is None or row.kind is not SettingKind.BOOL:
        logger.debug("ignoring toggle of %r", action.key)
        return state, NONE
    config = state.system.config
    return _apply(state, config.with_value(row.key, not getattr(config, row.key)))


def _adjust(state: AppState, action: AdjustSetting):
    row = setting_row(action.key)
    if row is None or row.kind is not SettingKind.INT:
        logger.debug("ignoring adjustment of %r", action.key)
        return state, NONE
    config = state.system.config
    value = getattr(config, row.key) + action.delta * row.step
    value = max(row.minimum, min(row.maximum, value))
    return _apply(state, config.with_value(row.key, value))


def _saved(state: AppState, action: ConfigSaved):
    if action.error:
        system = state.system.with_status(f"Could not save settings: {action.error}", is_error=True)
    else:
        system = state.system.with_status(f"Settings saved to {action.path}" if action.path else "Settings saved")
    return replace(state, system=system), NONE


HANDLERS = {
    ToggleSetting: _toggle,
    AdjustSetting: _adjust,
    ConfigSaved: _saved,
}

reducer = SubReducer("settings", HANDLERS)

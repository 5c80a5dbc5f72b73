"""Assembles a Runtime for the dashboard from a Config."""

import logging

from termdash.app.components.root import build_view
from termdash.app.effects import DataEffects, effect_failed
from termdash.app.provider import DataProvider, FixtureProvider, HttpDataProvider
from termdash.app.reducer import reduce
from termdash.app.state import initial_state
from termdash.core.runtime import Runtime
from termdash.io import settings
from termdash.io.settings import Config

logger = logging.getLogger(__name__)


def make_provider(config: Config) -> DataProvider:
    if config.base_url and not config.demo:
        logger.info("using HTTP provider at %s", config.base_url)
        return HttpDataProvider(config.base_url)
    logger.info("using demo fixture provider")
    return FixtureProvider()


def make_runtime(
    config: Config,
    provider: DataProvider | None = None,
    *,
    save_config=settings.save_config,
    width: int = 80,
    height: int = 24,
) -> Runtime:
    effects = DataEffects(provider or make_provider(config), save_config=save_config)
    return Runtime(
        initial_state(config, width=width, height=height),
        reduce,
        build_view,
        effects.perform,
        on_failure=effect_failed,
        debug=config.debug,
    )

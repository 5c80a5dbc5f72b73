"""App lifecycle management for Textual in-process tests.

Every call creates a fresh runtime, provider and app. Settings saves are
captured in a list instead of touching the filesystem.
"""

import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

from textual.pilot import Pilot

from termdash.app.provider import FixtureProvider
from termdash.app.wiring import make_runtime
from termdash.io.settings import Config
from termdash.tui.host import TermdashApp


@asynccontextmanager
async def run_app(
    *,
    size: tuple[int, int] = (80, 24),
    config: Config | None = None,
    provider=None,
    refresh_on_start: bool = True,
    clock=None,
) -> AsyncIterator[tuple[Pilot, TermdashApp]]:
    """Create and run a TermdashApp in test mode; yields (pilot, app).

    The periodic Tick is disabled so tests control time explicitly.
    """
    saved = []
    runtime = make_runtime(
        config or Config(),
        provider or FixtureProvider(count=12),
        save_config=saved.append,
        width=size[0],
        height=size[1],
    )
    app = TermdashApp(runtime, tick_interval=0, refresh_on_start=refresh_on_start, clock=clock or time.monotonic)
    app.saved_configs = saved
    try:
        async with app.run_test(size=size) as pilot:
            yield pilot, app
    finally:
        runtime.close()


async def settle(pilot: Pilot, app: TermdashApp, rounds: int = 5) -> None:
    """Let worker threads finish and the pump fold their results in."""
    for _ in range(rounds):
        app.runtime.scheduler.wait_idle(1.0)
        app.pump()
        await pilot.pause()

"""Textual host: shows the CellBuffer and feeds input into the Runtime.

// [LAW:single-enforcer] pump() is the only caller of Runtime.drain() and
//   Renderer.render_with_diff() while the app runs.

The screen holds one BufferView using the Line API. Keys become Actions via
key_to_action; worker-thread results land in the runtime queue and are picked
up by the periodic pump.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from textual.app import App, ComposeResult
from textual.strip import Strip
from textual.widget import Widget

from termdash.app.action import Resize, Tick
from termdash.app.keys import key_to_action
from termdash.core.buffer import CellBuffer
from termdash.core.errors import RuntimeInvariantError
from termdash.core.renderer import Renderer, RenderStats
from termdash.core.runtime import Runtime
from termdash.tui.strips import row_strip

logger = logging.getLogger(__name__)


class BufferView(Widget):
    DEFAULT_CSS = """
    BufferView {
        width: 1fr;
        height: 1fr;
    }
    """

    def __init__(self, buffer: CellBuffer, **kwargs):
        super().__init__(**kwargs)
        self.buffer = buffer

    def render_line(self, y: int) -> Strip:
        return row_strip(self.buffer, y, self.size.width)


class TermdashApp(App):
    CSS = """
    Screen {
        overflow: hidden;
    }
    """
    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        runtime: Runtime,
        *,
        pump_interval: float = 0.05,
        tick_interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        refresh_on_start: bool = True,
    ):
        super().__init__()
        self.runtime = runtime
        self.renderer = Renderer()
        self.buffer = CellBuffer(0, 0)
        self.last_stats: RenderStats | None = None
        self._pump_interval = pump_interval
        self._tick_interval = tick_interval
        self._clock = clock
        self._refresh_on_start = refresh_on_start
        self._dirty = True

    def compose(self) -> ComposeResult:
        yield BufferView(self.buffer, id="buffer")

    def on_mount(self) -> None:
        self._resize_buffer(self.size.width, self.size.height)
        if self._refresh_on_start:
            # The first Tick stamps the clock and triggers the initial refresh.
            self.runtime.dispatch(Tick(self._clock()))
        self.set_interval(self._pump_interval, self.pump)
        if self._tick_interval > 0:
            self.set_interval(self._tick_interval, self.tick)
        self.pump()

    def on_unmount(self) -> None:
        self.runtime.close()

    def _resize_buffer(self, width: int, height: int) -> None:
        if (width, height) == (self.buffer.width, self.buffer.height):
            return
        self.buffer.resize(width, height)
        self.renderer.reset()
        self.runtime.dispatch(Resize(width, height))
        self._dirty = True

    def on_resize(self, event) -> None:
        self._resize_buffer(event.size.width, event.size.height)
        self.pump()

    def tick(self) -> None:
        self.runtime.dispatch(Tick(self._clock()))
        self.pump()

    async def on_key(self, event) -> None:
        """// [LAW:single-enforcer] on_key is the sole key dispatcher."""
        action = key_to_action(event.key, self.runtime.state)
        if action is None:
            return
        event.prevent_default()
        event.stop()
        self.runtime.dispatch(action)
        self.pump()

    def pump(self) -> None:
        """Drain queued actions and repaint what changed."""
        try:
            processed = self.runtime.drain()
        except RuntimeInvariantError:
            raise
        except Exception:
            logger.exception("reducer failed while draining")
            return
        if processed or self._dirty:
            self._dirty = False
            self.buffer.reset_writes()
            self.last_stats = self.renderer.render_with_diff(self.runtime.build(), self.buffer.region, self.buffer)
            if self.last_stats.writes:
                self.query_one(BufferView).refresh()
        if self.runtime.state.system.should_quit:
            self.exit()

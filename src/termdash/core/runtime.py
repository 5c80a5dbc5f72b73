"""Runtime: owner of the live State, the action queue, and the scheduler.

// [LAW:single-enforcer] drain() is the only code that replaces the State.
// [LAW:one-way-deps] The runtime is generic over State and Action; the
//   reducer, root view and request performer are injected.

State machine: Idle <-> Draining. dispatch() is valid in both and only
appends. A drain() that finds another drain already running is a contract
violation: RuntimeInvariantError in debug mode, otherwise logged and
coalesced (the running loop will consume whatever was queued).

The queue is a queue.SimpleQueue: any thread may dispatch; one drain loop
consumes.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Callable

from termdash.core.effect import Effect
from termdash.core.element import Element
from termdash.core.errors import violation
from termdash.core.scheduler import EffectScheduler, FailureHandler, Performer

logger = logging.getLogger(__name__)

Reducer = Callable[[object, object], tuple[object, Effect]]
View = Callable[[object], Element]


def _no_performer(request: object) -> object:
    raise RuntimeError(f"No performer configured for request {request!r}")


class Runtime:
    def __init__(
        self,
        initial_state,
        reducer: Reducer,
        view: View,
        perform: Performer | None = None,
        *,
        on_failure: FailureHandler | None = None,
        debug: bool = False,
        max_workers: int = 4,
    ):
        self._state = initial_state
        self._reducer = reducer
        self._view = view
        self._debug = debug
        self._queue: queue.SimpleQueue = queue.SimpleQueue()
        self._drain_lock = threading.Lock()
        self._draining = False
        self._scheduler = EffectScheduler(
            self._queue.put,
            perform or _no_performer,
            on_failure=on_failure,
            max_workers=max_workers,
        )

    @property
    def state(self):
        """The current complete snapshot."""
        return self._state

    @property
    def is_draining(self) -> bool:
        return self._draining

    @property
    def scheduler(self) -> EffectScheduler:
        return self._scheduler

    def pending(self) -> int:
        return self._queue.qsize()

    def dispatch(self, action) -> None:
        """Enqueue action; never runs the reducer."""
        self._queue.put(action)

    def drain(self) -> int:
        """Reduce queued actions until the queue is empty. Returns the count."""
        if not self._drain_lock.acquire(blocking=False):
            violation("drain() called while a drain is in progress", debug=self._debug, logger=logger)
            return 0
        processed = 0
        while True:
            try:
                self._draining = True
                while True:
                    try:
                        action = self._queue.get_nowait()
                    except queue.Empty:
                        break
                    logger.debug("ACTION: %r", action)
                    new_state, effect = self._reducer(self._state, action)
                    self._state = new_state
                    processed += 1
                    self._scheduler.schedule(effect)
            finally:
                self._draining = False
                self._drain_lock.release()
            # A drain turned away while we held the lock relies on us to see
            # what it queued; if someone else holds the lock now, it will.
            if self._queue.empty() or not self._drain_lock.acquire(blocking=False):
                return processed

    def build(self) -> Element:
        """Project the current State into this frame's Element tree."""
        return self._view(self._state)

    def settle(self, timeout: float = 5.0) -> int:
        """Drain repeatedly until no action is queued and no request is in flight.

        Intended for non-interactive use (tests, snapshot rendering).
        Returns the number of actions processed; stops early on timeout.
        """
        deadline = time.monotonic() + timeout
        total = 0
        while True:
            total += self.drain()
            if self._scheduler.in_flight == 0 and self._queue.empty():
                return total
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                logger.warning("settle() timed out with %d request(s) in flight", self._scheduler.in_flight)
                return total
            self._scheduler.wait_idle(min(remaining, 0.05))

    def close(self) -> None:
        """Tear down; in-flight asynchronous results will be discarded."""
        self._scheduler.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
        return False

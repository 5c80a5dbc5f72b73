"""Effect scheduler: turns Effect values into queued actions.

// [LAW:single-enforcer] The only place Effects are interpreted.

- NoEffect: dropped.
- Dispatch: the action goes to the back of the queue (FIFO with everything
  already pending). The drain loop picks it up on a later iteration; the
  reducer is never re-entered from inside a reduction.
- Batch: members scheduled independently, no ordering promise.
- Async: the request runs on a worker thread; exactly one resulting action
  is enqueued. After close() results are discarded.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor

from termdash.core.effect import Async, Batch, Dispatch, Effect, NoEffect

logger = logging.getLogger(__name__)

Performer = Callable[[object], object]
FailureHandler = Callable[[object, BaseException], object]


class EffectScheduler:
    def __init__(
        self,
        enqueue: Callable[[object], None],
        perform: Performer,
        on_failure: FailureHandler | None = None,
        max_workers: int = 4,
    ):
        self._enqueue = enqueue
        self._perform = perform
        self._on_failure = on_failure
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="termdash-effect")
        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)
        self._generation = 0
        self._closed = False
        self._in_flight = 0
        self._futures: set[Future] = set()

    @property
    def in_flight(self) -> int:
        with self._lock:
            return self._in_flight

    @property
    def closed(self) -> bool:
        return self._closed

    def schedule(self, effect: Effect) -> None:
        if isinstance(effect, NoEffect):
            return
        if isinstance(effect, Dispatch):
            self._enqueue(effect.action)
            return
        if isinstance(effect, Batch):
            for member in effect.effects:
                self.schedule(member)
            return
        if isinstance(effect, Async):
            self._spawn(effect.request)
            return
        raise TypeError(f"Unknown effect type: {type(effect).__name__}")

    def _spawn(self, request: object) -> None:
        with self._lock:
            if self._closed:
                logger.debug("scheduler closed; dropping request %r", request)
                return
            self._in_flight += 1
            future = self._executor.submit(self._run, request, self._generation)
            self._futures.add(future)
        future.add_done_callback(self._forget)

    def _forget(self, future: Future) -> None:
        with self._lock:
            self._futures.discard(future)

    def _run(self, request: object, generation: int) -> None:
        action = None
        try:
            action = self._perform(request)
        except Exception as exc:
            # Performers are expected to turn failures into actions themselves.
            logger.exception("effect performer raised for %r", request)
            if self._on_failure is not None:
                try:
                    action = self._on_failure(request, exc)
                except Exception:
                    logger.exception("failure handler raised for %r", request)
        with self._lock:
            try:
                if self._closed or generation != self._generation:
                    logger.debug("discarding result of abandoned request %r", request)
                elif action is None:
                    logger.warning("request %r resolved to no action", request)
                else:
                    self._enqueue(action)
            finally:
                self._in_flight -= 1
                if self._in_flight == 0:
                    self._idle.notify_all()

    def wait_idle(self, timeout: float | None = None) -> bool:
        """Block until no request is in flight. Returns False on timeout."""
        with self._idle:
            return self._idle.wait_for(lambda: self._in_flight == 0, timeout=timeout)

    def close(self, wait: bool = False) -> None:
        """Abandon in-flight work; later results are dropped."""
        with self._lock:
            self._closed = True
            self._generation += 1
            pending = list(self._futures)
        for future in pending:
            if future.cancel():
                with self._lock:
                    self._in_flight -= 1
                    if self._in_flight == 0:
                        self._idle.notify_all()
        self._executor.shutdown(wait=wait)

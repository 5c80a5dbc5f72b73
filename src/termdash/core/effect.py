"""Effects: immutable descriptions of work to run after a transition.

Reducers return these; only the runtime's scheduler acts on them. An Effect
never touches State and never performs I/O itself.

// [LAW:dataflow-not-control-flow] Async carries a request *value*, not a
//   closure, so two reductions of the same input compare equal.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Effect:
    """Base class for all effects."""


@dataclass(frozen=True)
class NoEffect(Effect):
    pass


NONE = NoEffect()


@dataclass(frozen=True)
class Dispatch(Effect):
    """Re-enter the queue (at the back) with `action`."""

    action: object


@dataclass(frozen=True)
class Batch(Effect):
    """Effects scheduled independently; no ordering between members."""

    effects: tuple[Effect, ...]


@dataclass(frozen=True)
class Async(Effect):
    """Work described by `request`, resolved off-thread to exactly one action."""

    request: object


def _flatten(effects):
    for effect in effects:
        if isinstance(effect, Batch):
            yield from _flatten(effect.effects)
        elif not isinstance(effect, NoEffect):
            yield effect


def batch(*effects: Effect) -> Effect:
    """Combine effects, flattening nested batches and dropping no-ops."""
    flat = list(_flatten(effects))
    if not flat:
        return NONE
    if len(flat) == 1:
        return flat[0]
    return Batch(tuple(flat))


def iter_requests(effect: Effect):
    """Yield every Async request reachable from effect (depth first)."""
    if isinstance(effect, Async):
        yield effect.request
    elif isinstance(effect, Batch):
        for member in effect.effects:
            yield from iter_requests(member)

"""Sub-reducers, one per concern.

Each module exposes HANDLERS, a dispatch table keyed by action class, and
wraps it in a SubReducer. A SubReducer declines (returns None) any action
outside its table.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from termdash.core.effect import Effect

Result = tuple[object, Effect]
Handler = Callable[[object, object], Result]


@dataclass(frozen=True)
class SubReducer:
    name: str
    handlers: Mapping[type, Handler]

    @property
    def handles(self) -> frozenset[type]:
        return frozenset(self.handlers)

    def __call__(self, state, action) -> Result | None:
        handler = self.handlers.get(type(action))
        if handler is None:
            return None
        return handler(state, action)

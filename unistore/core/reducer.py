"""
Reducer: Pure state transition functions.

Every reducer must be:
- Pure (no side effects, no I/O, no dispatch)
- Total (unknown action kinds return the slice unchanged, same reference)
- Self-seeding (None state returns the reducer's initial value)
"""

import logging
from typing import Any, Callable, Dict, Mapping

from .actions import Action
from .errors import InvalidReducerError
from .immutable import FrozenDict

logger = logging.getLogger(__name__)

# Reducer signature: (state_or_None, action) -> new_state
ReducerFn = Callable[[Any, Action], Any]

# Handler signature: (current_slice, action) -> new_slice
Handler = Callable[[Any, Action], Any]


class SliceReducer:
    """
    Registry of handlers keyed by action kind, for one state slice.

    Usage:
        todos = SliceReducer(initial=())
        todos.register("ADD", lambda cur, a: cur + (a["item"],))

        @todos.on("CLEAR")
        def clear(cur, a):
            return ()

        new_slice = todos(old_slice, action)
    """

    def __init__(self, initial: Any) -> None:
        self.initial = initial
        self._handlers: Dict[str, Handler] = {}

    def register(self, kind: str, handler: Handler) -> None:
        """
        Register a handler for an action kind.

        Args:
            kind: Action discriminant
            handler: Pure function (current_slice, action) -> new_slice
        """
        self._handlers[kind] = handler

    def on(self, kind: str) -> Callable[[Handler], Handler]:
        """Decorator form of register()."""
        def decorator(handler: Handler) -> Handler:
            self.register(kind, handler)
            return handler
        return decorator

    def handles(self, kind: str) -> bool:
        return kind in self._handlers

    def __call__(self, state: Any, action: Action) -> Any:
        if state is None:
            state = self.initial
        handler = self._handlers.get(action.kind)
        if handler is None:
            return state
        return handler(state, action)


def combine_reducers(reducers: Mapping[str, ReducerFn]) -> ReducerFn:
    """
    Combine named slice reducers into one reducer over a keyed state.

    The combined reducer returns the original state object when no slice
    changed by reference, otherwise a new FrozenDict holding every slice.

    Raises:
        InvalidReducerError: If the mapping is empty or holds non-callables
    """
    if not reducers:
        raise InvalidReducerError("combine_reducers() needs at least one slice reducer")
    for name, fn in reducers.items():
        if not callable(fn):
            raise InvalidReducerError(f"Reducer for slice '{name}' is not callable")

    final = dict(reducers)
    names = tuple(final.keys())
    warned = set()

    def combined(state: Any, action: Action) -> Any:
        if state is None:
            state = FrozenDict()

        unexpected = [k for k in state.keys() if k not in final]
        for key in unexpected:
            if key not in warned:
                warned.add(key)
                logger.warning(f"Dropping unexpected state slice '{key}' (no reducer registered)")

        changed = bool(unexpected) or len(state) != len(names)
        next_state = {}
        for name in names:
            prev = state.get(name)
            nxt = final[name](prev, action)
            if nxt is None:
                raise InvalidReducerError(
                    f"Reducer for slice '{name}' returned None for action '{action.kind}'"
                )
            next_state[name] = nxt
            changed = changed or nxt is not prev

        return FrozenDict(next_state) if changed else state

    return combined

"""
Store: single source of truth for an immutable state tree.

Dispatch cycle:

    IDLE -> DISPATCHING -> NOTIFYING -> IDLE

- DISPATCHING: the reducer runs; any nested dispatch or subscribe raises
  ReentrantDispatchError.
- NOTIFYING: listeners run against a snapshot of the subscriber list taken
  at cycle start. Dispatches issued from a listener are queued and run as the
  next full cycle, so no listener observes two interleaved cycles.

Listeners run only when the reducer returns a new state object.
"""

import logging
from collections import deque
from enum import Enum
from typing import Any, Callable, Deque, List, Mapping, Optional, Sequence

from .core.actions import Action, describe
from .core.errors import InvalidActionError, ReentrantDispatchError
from .core.immutable import changed_keys, freeze
from .core.reducer import ReducerFn
from .metrics import track_action, track_dispatch_duration, track_listeners
from .middleware import Middleware, apply_middleware

logger = logging.getLogger(__name__)

INIT = "@@unistore/INIT"
REPLACE = "@@unistore/REPLACE"

Listener = Callable[[], None]


class DispatchPhase(Enum):
    IDLE = "idle"
    DISPATCHING = "dispatching"
    NOTIFYING = "notifying"


class _Subscription:
    """One registration of a listener. Identity matters, not the callable."""

    __slots__ = ("listener", "active")

    def __init__(self, listener: Listener) -> None:
        self.listener = listener
        self.active = True


class Store:
    """
    State container.

    Usage:
        store = Store(root_reducer, middleware=[thunk])
        unsubscribe = store.subscribe(lambda: print(store.get_state()))
        store.dispatch(action("SELECT_TAB", key="b"))
        unsubscribe()
    """

    def __init__(
        self,
        reducer: ReducerFn,
        preloaded_state: Any = None,
        middleware: Sequence[Middleware] = (),
    ) -> None:
        if not callable(reducer):
            raise TypeError("Store reducer must be callable")

        self._reducer = reducer
        self._state = freeze(preloaded_state)
        self._subscriptions: List[_Subscription] = []
        self._phase = DispatchPhase.IDLE
        self._pending: Deque[Action] = deque()

        if middleware:
            self._dispatch = apply_middleware(self.get_state, self._base_dispatch, middleware)
        else:
            self._dispatch = self._base_dispatch

        # Seed every slice with its initial value
        self._base_dispatch(Action(kind=INIT))

    @property
    def phase(self) -> DispatchPhase:
        return self._phase

    def get_state(self) -> Any:
        """Current immutable state."""
        return self._state

    def dispatch(self, item: Any) -> Any:
        """
        Route item through the middleware chain to the reducer.

        Returns:
            The action for plain actions, or whatever a middleware returned
            (e.g. the coroutine of an async effect)

        Raises:
            ReentrantDispatchError: If called while a reducer is running,
                for effects as well as plain actions
        """
        self._ensure_not_reducing(f"dispatch {describe(item)}")
        return self._dispatch(item)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a zero-argument listener.

        Returns:
            Unsubscribe function; calling it more than once is a no-op

        Raises:
            TypeError: If listener is not callable
            ReentrantDispatchError: If called while a reducer is running
        """
        if not callable(listener):
            raise TypeError("Listener must be callable")
        self._ensure_not_reducing("subscribe")

        sub = _Subscription(listener)
        self._subscriptions.append(sub)
        track_listeners(1)

        def unsubscribe() -> None:
            if not sub.active:
                return
            self._ensure_not_reducing("unsubscribe")
            sub.active = False
            self._subscriptions.remove(sub)
            track_listeners(-1)

        return unsubscribe

    def replace_reducer(self, reducer: ReducerFn) -> None:
        """Swap the root reducer and let new slices initialize."""
        if not callable(reducer):
            raise TypeError("Store reducer must be callable")
        self._ensure_not_reducing("replace_reducer")
        self._reducer = reducer
        self._base_dispatch(Action(kind=REPLACE))

    def _ensure_not_reducing(self, operation: str) -> None:
        if self._phase is DispatchPhase.DISPATCHING:
            raise ReentrantDispatchError(
                f"Cannot {operation} while a reducer is running; reducers must be pure"
            )

    def _base_dispatch(self, item: Any) -> Any:
        if not isinstance(item, Action):
            raise InvalidActionError(
                f"Only plain actions reach the reducer, got {describe(item)}; "
                "install the thunk middleware to dispatch effects"
            )
        self._ensure_not_reducing(f"dispatch '{item.kind}'")

        if self._phase is DispatchPhase.NOTIFYING:
            logger.debug(f"Queued '{item.kind}' dispatched during notification")
            self._pending.append(item)
            return item

        try:
            self._run_cycle(item)
            while self._pending:
                self._run_cycle(self._pending.popleft())
        except Exception:
            if self._pending:
                logger.error(f"Discarding {len(self._pending)} queued action(s) after a failed cycle")
                self._pending.clear()
            raise
        return item

    def _run_cycle(self, item: Action) -> None:
        with track_dispatch_duration():
            previous = self._state
            self._phase = DispatchPhase.DISPATCHING
            try:
                next_state = self._reducer(previous, item)
            finally:
                self._phase = DispatchPhase.IDLE
            track_action(item.kind)

            if next_state is previous:
                logger.debug(f"'{item.kind}' left state unchanged")
                return

            self._state = next_state
            if logger.isEnabledFor(logging.DEBUG) and isinstance(previous, Mapping) \
                    and isinstance(next_state, Mapping):
                logger.debug(
                    f"'{item.kind}' changed slices {list(changed_keys(previous, next_state))}"
                )

            snapshot = list(self._subscriptions)
            self._phase = DispatchPhase.NOTIFYING
            try:
                for sub in snapshot:
                    if sub.active:
                        sub.listener()
            finally:
                self._phase = DispatchPhase.IDLE


def create_store(
    reducer: ReducerFn,
    preloaded_state: Optional[Any] = None,
    middleware: Sequence[Middleware] = (),
) -> Store:
    """Construct a Store (composition-root helper)."""
    return Store(reducer, preloaded_state=preloaded_state, middleware=middleware)

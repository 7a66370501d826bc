"""
Middleware chain around the store's dispatch entry point.

A middleware is a curried function:

    def middleware(api):            # api.dispatch, api.get_state
        def wrap(next_dispatch):
            def dispatch(item):
                ...                 # inspect / transform / short-circuit
                return next_dispatch(item)
            return dispatch
        return wrap

Links compose in declared order: the first link is outermost and receives
the dispatch of the links after it as next_dispatch. api.dispatch is always
the fully augmented dispatch, so an effect dispatching from inside the chain
re-enters at the top.
"""

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from .core.actions import Action, Effect, describe
from .core.errors import MiddlewareError
from .logging_config import get_logger

DispatchFn = Callable[[Any], Any]
GetStateFn = Callable[[], Any]


@dataclass(frozen=True)
class MiddlewareAPI:
    """Store capabilities handed to each middleware link."""
    dispatch: DispatchFn
    get_state: GetStateFn


Middleware = Callable[[MiddlewareAPI], Callable[[DispatchFn], DispatchFn]]


def apply_middleware(
    get_state: GetStateFn,
    base_dispatch: DispatchFn,
    middleware: Sequence[Middleware],
) -> DispatchFn:
    """
    Build the augmented dispatch.

    Args:
        get_state: Store state accessor
        base_dispatch: Reducer-driving dispatch (innermost link)
        middleware: Links in declared order (first = outermost)

    Returns:
        Augmented dispatch function

    Raises:
        MiddlewareError: If a link dispatches while the chain is being built
    """
    def dispatch_during_build(item: Any) -> Any:
        raise MiddlewareError(
            f"Cannot dispatch {describe(item)} while constructing the middleware chain"
        )

    current = {"dispatch": dispatch_during_build}

    def dispatch(item: Any) -> Any:
        return current["dispatch"](item)

    api = MiddlewareAPI(dispatch=dispatch, get_state=get_state)
    wrappers = [link(api) for link in middleware]

    chained = base_dispatch
    for wrap in reversed(wrappers):
        chained = wrap(chained)

    current["dispatch"] = chained
    return chained


def thunk(api: MiddlewareAPI) -> Callable[[DispatchFn], DispatchFn]:
    """
    Deferred-command support.

    An Effect is run with (dispatch, get_state) and its return value (for an
    async effect, the coroutine) is handed back to the caller. Plain actions
    pass through unchanged.
    """
    def wrap(next_dispatch: DispatchFn) -> DispatchFn:
        def dispatch(item: Any) -> Any:
            if isinstance(item, Effect):
                return item.run(api.dispatch, api.get_state)
            return next_dispatch(item)
        return dispatch
    return wrap


def logging_middleware(api: MiddlewareAPI) -> Callable[[DispatchFn], DispatchFn]:
    """Log every dispatched item, tagged with its kind as trace_id."""
    def wrap(next_dispatch: DispatchFn) -> DispatchFn:
        def dispatch(item: Any) -> Any:
            log = get_logger(__name__, trace_id=describe(item))
            if isinstance(item, Action):
                log.debug(f"dispatch {item.kind}", extra={"payload_keys": sorted(item.payload)})
            else:
                log.debug(f"dispatch {describe(item)}")
            result = next_dispatch(item)
            if inspect.isawaitable(result):
                log.debug("effect returned an awaitable")
            return result
        return dispatch
    return wrap

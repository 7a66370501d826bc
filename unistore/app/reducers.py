"""
Reducer handlers for the text and tabs slices.

All handlers are pure. A handler that has nothing to change returns its
input slice so the store can skip notification.
"""

from dataclasses import replace

from ..content import validate_payload
from ..core.actions import Action
from ..core.immutable import FrozenDict
from ..core.reducer import SliceReducer, combine_reducers
from .actions import (
    RECEIVE_TABS,
    RECEIVE_TEXT,
    REQUEST_TABS,
    REQUEST_TEXT,
    SELECT_TAB,
    TABS_FAILED,
    TEXT_FAILED,
)
from .state import INITIAL_TABS, INITIAL_TEXT, Status, TabsState, TextState

text_reducer = SliceReducer(initial=INITIAL_TEXT)
tabs_reducer = SliceReducer(initial=INITIAL_TABS)


@text_reducer.on(REQUEST_TEXT)
def on_request_text(cur: TextState, action: Action) -> TextState:
    if cur.status is Status.LOADING:
        return cur
    return replace(cur, status=Status.LOADING, error=None)


@text_reducer.on(RECEIVE_TEXT)
def on_receive_text(cur: TextState, action: Action) -> TextState:
    text = action["text"]
    if cur.status is Status.READY and cur.text == text:
        return cur
    return TextState(status=Status.READY, text=text)


@text_reducer.on(TEXT_FAILED)
def on_text_failed(cur: TextState, action: Action) -> TextState:
    return replace(cur, status=Status.FAILED, error=action.get("error", "unknown error"))


@tabs_reducer.on(REQUEST_TABS)
def on_request_tabs(cur: TabsState, action: Action) -> TabsState:
    if cur.status is Status.LOADING:
        return cur
    return replace(cur, status=Status.LOADING, error=None)


@tabs_reducer.on(RECEIVE_TABS)
def on_receive_tabs(cur: TabsState, action: Action) -> TabsState:
    tabs = FrozenDict((key, validate_payload(p)) for key, p in action["tabs"].items())
    if cur.selected in tabs:
        selected = cur.selected
    else:
        selected = next(iter(tabs), None)
    return TabsState(status=Status.READY, tabs=tabs, selected=selected)


@tabs_reducer.on(TABS_FAILED)
def on_tabs_failed(cur: TabsState, action: Action) -> TabsState:
    return replace(cur, status=Status.FAILED, error=action.get("error", "unknown error"))


@tabs_reducer.on(SELECT_TAB)
def on_select_tab(cur: TabsState, action: Action) -> TabsState:
    key = action.get("key")
    if key == cur.selected or key not in cur.tabs:
        return cur
    return replace(cur, selected=key)


def root_reducer():
    """Combined reducer for the {"text", "tabs"} state tree."""
    return combine_reducers({"text": text_reducer, "tabs": tabs_reducer})

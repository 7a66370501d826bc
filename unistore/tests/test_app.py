"""
Tests for the tab view application: slices, effects and TabView.
"""

import asyncio

import pytest

from unistore.app import (
    SIX_TAB_FIXTURE,
    TEXT_FIXTURE,
    Status,
    TabView,
    build_app_store,
    fetch_tabs,
    fetch_text,
    receive_tabs,
    receive_text,
    select_tab,
    tabs_reducer,
    text_reducer,
)
from unistore.app.state import INITIAL_TABS, INITIAL_TEXT
from unistore.content import RenderMode, validate_payload
from unistore.core.actions import Action, action
from unistore.source import StaticContentSource


def _payloads():
    return {key: validate_payload(raw) for key, raw in SIX_TAB_FIXTURE.items()}


def test_initial_app_state():
    store = build_app_store()

    assert store.get_state()["text"] is INITIAL_TEXT
    assert store.get_state()["tabs"] is INITIAL_TABS


def test_text_reducer_receive_text():
    state = text_reducer(None, receive_text("LOREM IPSUM"))

    assert state.status is Status.READY
    assert state.text == "LOREM IPSUM"
    assert text_reducer(state, receive_text("LOREM IPSUM")) is state


def test_tabs_reducer_selects_first_key_on_receive():
    state = tabs_reducer(None, receive_tabs(_payloads()))

    assert state.status is Status.READY
    assert state.selected == "string"
    assert state.active().editable is False


def test_tabs_reducer_keeps_selection_across_refetch():
    state = tabs_reducer(None, receive_tabs(_payloads()))
    state = tabs_reducer(state, select_tab("object"))

    refreshed = tabs_reducer(state, receive_tabs(_payloads()))

    assert refreshed.selected == "object"


def test_select_unknown_or_same_tab_keeps_reference():
    state = tabs_reducer(None, receive_tabs(_payloads()))

    assert tabs_reducer(state, select_tab("missing")) is state
    assert tabs_reducer(state, select_tab("string")) is state


def test_receive_tabs_from_wire_dict():
    """Raw payloads arriving through Action.from_dict are validated too."""
    a = Action.from_dict({"kind": "RECEIVE_TABS", "tabs": SIX_TAB_FIXTURE})

    state = tabs_reducer(None, a)

    assert len(state.tabs) == 6


def test_receive_tabs_action_is_deeply_frozen():
    """Wire data handed to receive_tabs cannot be changed through the action."""
    raw = {"a": {"editable": True, "body": ["x"]}}
    a = receive_tabs(raw)

    with pytest.raises(AttributeError):
        a["tabs"]["a"]["body"].append("MUTATED")

    raw["a"]["body"].append("later")
    assert a["tabs"]["a"]["body"] == ("x",)
    assert tabs_reducer(None, a).active().body.items == ("x",)


def test_unknown_kind_keeps_slices():
    store = build_app_store()
    before = store.get_state()

    store.dispatch(action("UNRELATED"))

    assert store.get_state() is before


def test_fetch_text_effect():
    store = build_app_store()
    statuses = []
    store.subscribe(lambda: statuses.append(store.get_state()["text"].status))

    result = asyncio.run(store.dispatch(fetch_text(StaticContentSource(text=TEXT_FIXTURE))))

    assert result == "LOREM IPSUM"
    assert statuses == [Status.LOADING, Status.READY]
    assert store.get_state()["text"].text == "LOREM IPSUM"


def test_fetch_tabs_failure_becomes_state():
    store = build_app_store()

    result = asyncio.run(store.dispatch(fetch_tabs(StaticContentSource(error="offline"))))

    tabs_state = store.get_state()["tabs"]
    assert result is None
    assert tabs_state.status is Status.FAILED
    assert tabs_state.error == "offline"


def test_fetch_tabs_contract_violation_becomes_state():
    bad = {"a": {"editable": "no", "body": "x"}}
    store = build_app_store()

    asyncio.run(store.dispatch(fetch_tabs(StaticContentSource(tabs=bad))))

    tabs_state = store.get_state()["tabs"]
    assert tabs_state.status is Status.FAILED
    assert "editable" in tabs_state.error


def test_fetch_leaves_other_slice_identical():
    store = build_app_store()
    text_before = store.get_state()["text"]

    asyncio.run(store.dispatch(fetch_tabs(StaticContentSource(tabs=SIX_TAB_FIXTURE))))

    assert store.get_state()["text"] is text_before


def test_tab_view_renders_active_tab():
    store = build_app_store()
    rendered = []
    view = TabView(store, lambda key, resolved: rendered.append((key, resolved)))

    asyncio.run(store.dispatch(fetch_tabs(StaticContentSource(tabs=SIX_TAB_FIXTURE))))
    view.select("list-editable")

    keys = [key for key, _ in rendered]
    assert keys == ["string", "list-editable"]
    last = rendered[-1][1]
    assert last.instruction.mode is RenderMode.EDITABLE
    assert last.instruction.initial_value == "DOLOR SIT AMET"


def test_tab_view_ignores_unrelated_changes():
    store = build_app_store()
    rendered = []
    TabView(store, lambda key, resolved: rendered.append(key))
    asyncio.run(store.dispatch(fetch_tabs(StaticContentSource(tabs=SIX_TAB_FIXTURE))))
    rendered.clear()

    store.dispatch(receive_text("unrelated"))

    assert rendered == []


def test_closed_view_stops_rendering_but_store_updates():
    """Late effects still land in the store after the view is closed."""
    store = build_app_store()
    rendered = []
    view = TabView(store, lambda key, resolved: rendered.append(key))
    source = StaticContentSource(tabs=SIX_TAB_FIXTURE, delay=0.01)

    async def scenario():
        pending = store.dispatch(fetch_tabs(source))
        view.close()
        await pending

    asyncio.run(scenario())

    assert view.closed
    assert rendered == []
    assert store.get_state()["tabs"].status is Status.READY


def test_tab_view_refresh_without_tabs():
    store = build_app_store()
    view = TabView(store, lambda key, resolved: None)

    assert view.refresh() is None

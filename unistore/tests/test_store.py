"""
Tests for the store dispatch cycle.

Critical: listeners observe one cycle at a time, in subscription order,
against a snapshot of the subscriber list.
"""

import pytest
from prometheus_client import CollectorRegistry, Counter

from unistore import metrics
from unistore.core.actions import Effect, action
from unistore.core.errors import InvalidActionError, ReentrantDispatchError
from unistore.core.immutable import FrozenDict
from unistore.core.reducer import SliceReducer, combine_reducers
from unistore.middleware import thunk
from unistore.store import INIT, DispatchPhase, Store, create_store


def _counter_reducer():
    counter = SliceReducer(initial=0)
    counter.register("INC", lambda cur, a: cur + 1)
    counter.register("SET", lambda cur, a: a["value"])
    return combine_reducers({"count": counter})


def test_store_initializes_state_from_reducers():
    store = create_store(_counter_reducer())

    assert store.get_state() == {"count": 0}
    assert store.phase is DispatchPhase.IDLE


def test_store_preloaded_state_is_frozen():
    store = create_store(_counter_reducer(), preloaded_state={"count": 7})

    assert isinstance(store.get_state(), FrozenDict)
    assert store.get_state()["count"] == 7


def test_dispatch_returns_action_and_updates_state():
    store = create_store(_counter_reducer())
    a = action("INC")

    assert store.dispatch(a) is a
    assert store.get_state()["count"] == 1


def test_listeners_called_once_in_subscription_order():
    store = create_store(_counter_reducer())
    calls = []
    for i in range(5):
        store.subscribe(lambda i=i: calls.append(i))

    store.dispatch(action("INC"))

    assert calls == [0, 1, 2, 3, 4]


def test_listeners_skipped_when_state_unchanged():
    store = create_store(_counter_reducer())
    calls = []
    store.subscribe(lambda: calls.append(1))

    store.dispatch(action("UNKNOWN"))
    store.dispatch(action("SET", value=0))

    assert calls == []


def test_unsubscribe_is_idempotent():
    store = create_store(_counter_reducer())
    calls = []
    unsubscribe = store.subscribe(lambda: calls.append(1))

    unsubscribe()
    unsubscribe()
    store.dispatch(action("INC"))

    assert calls == []


def test_unsubscribe_removes_only_that_registration():
    """The same callable subscribed twice is two registrations."""
    store = create_store(_counter_reducer())
    calls = []

    def listener():
        calls.append(1)

    first = store.subscribe(listener)
    store.subscribe(listener)
    first()
    store.dispatch(action("INC"))

    assert calls == [1]


def test_listener_unsubscribing_itself_does_not_run_again():
    store = create_store(_counter_reducer())
    calls = []
    holder = {}

    def once():
        calls.append("once")
        holder["unsubscribe"]()

    holder["unsubscribe"] = store.subscribe(once)
    store.subscribe(lambda: calls.append("other"))

    store.dispatch(action("INC"))
    store.dispatch(action("INC"))

    assert calls == ["once", "other", "other"]


def test_listener_removed_during_notification_is_skipped():
    """Removing a later listener mid-cycle prevents it from running this cycle."""
    store = create_store(_counter_reducer())
    calls = []
    handles = {}

    def first():
        calls.append("first")
        handles["second"]()

    store.subscribe(first)
    handles["second"] = store.subscribe(lambda: calls.append("second"))

    store.dispatch(action("INC"))

    assert calls == ["first"]


def test_listener_added_during_notification_runs_next_cycle():
    store = create_store(_counter_reducer())
    calls = []

    def adder():
        calls.append("adder")
        if len(calls) == 1:
            store.subscribe(lambda: calls.append("late"))

    store.subscribe(adder)

    store.dispatch(action("INC"))
    assert calls == ["adder"]

    store.dispatch(action("INC"))
    assert calls == ["adder", "adder", "late"]


def test_reducer_dispatch_raises_reentrant_error():
    """A reducer that dispatches must fail loudly and leave state unchanged."""
    holder = {}

    def bad(state, a):
        if a.kind == "BAD":
            holder["store"].dispatch(action("INC"))
        return state if state is not None else 0

    store = Store(bad)
    holder["store"] = store

    with pytest.raises(ReentrantDispatchError):
        store.dispatch(action("BAD"))

    assert store.get_state() == 0
    assert store.phase is DispatchPhase.IDLE

    # The store stays usable after the failure
    store.dispatch(action("OTHER"))


def test_reducer_dispatching_effect_raises_before_effect_runs():
    """Effects never start from inside a reducer, even with thunk installed."""
    holder = {}
    ran = []

    def bad(state, a):
        if a.kind == "BAD":
            holder["store"].dispatch(Effect(run=lambda dispatch, get_state: ran.append("effect")))
        return state if state is not None else 0

    store = Store(bad, middleware=[thunk])
    holder["store"] = store

    with pytest.raises(ReentrantDispatchError):
        store.dispatch(action("BAD"))

    assert ran == []
    assert store.phase is DispatchPhase.IDLE


def test_subscribe_inside_reducer_raises():
    holder = {}

    def bad(state, a):
        if a.kind == "BAD":
            holder["store"].subscribe(lambda: None)
        return state if state is not None else 0

    store = Store(bad)
    holder["store"] = store

    with pytest.raises(ReentrantDispatchError):
        store.dispatch(action("BAD"))


def test_dispatch_from_listener_is_queued_as_next_cycle():
    """Listeners never observe an interleaved later cycle."""
    store = create_store(_counter_reducer())
    seen = []

    def first():
        seen.append(("first", store.get_state()["count"]))
        if store.get_state()["count"] == 1:
            store.dispatch(action("INC"))
            # Queued: the current cycle's state is still visible
            seen.append(("after-dispatch", store.get_state()["count"]))

    def second():
        seen.append(("second", store.get_state()["count"]))

    store.subscribe(first)
    store.subscribe(second)

    store.dispatch(action("INC"))

    assert seen == [
        ("first", 1),
        ("after-dispatch", 1),
        ("second", 1),
        ("first", 2),
        ("second", 2),
    ]
    assert store.get_state()["count"] == 2


def test_listener_error_propagates_and_resets_phase():
    store = create_store(_counter_reducer())

    def boom():
        raise RuntimeError("listener failed")

    store.subscribe(boom)

    with pytest.raises(RuntimeError):
        store.dispatch(action("INC"))

    assert store.phase is DispatchPhase.IDLE
    assert store.get_state()["count"] == 1


def test_base_dispatch_rejects_non_actions():
    store = create_store(_counter_reducer())

    with pytest.raises(InvalidActionError):
        store.dispatch({"kind": "INC"})


def test_subscribe_rejects_non_callable():
    store = create_store(_counter_reducer())

    with pytest.raises(TypeError):
        store.subscribe("not callable")


def test_replace_reducer_seeds_new_slices():
    store = create_store(_counter_reducer())
    store.dispatch(action("INC"))

    names = SliceReducer(initial=("root",))
    counter = SliceReducer(initial=0)
    counter.register("INC", lambda cur, a: cur + 1)
    store.replace_reducer(combine_reducers({"count": counter, "names": names}))

    assert store.get_state() == {"count": 1, "names": ("root",)}


def test_init_action_reaches_reducer():
    kinds = []

    def recording(state, a):
        kinds.append(a.kind)
        return state

    Store(recording)

    assert kinds == [INIT]


def test_store_counts_reduced_actions(monkeypatch):
    registry = CollectorRegistry()
    counter = Counter("test_actions_total", "test", labelnames=["kind"], registry=registry)
    monkeypatch.setattr(metrics, "ACTIONS_TOTAL", counter)

    store = create_store(_counter_reducer())
    store.dispatch(action("INC"))
    store.dispatch(action("INC"))

    assert registry.get_sample_value("test_actions_total", {"kind": "INC"}) == 2.0


def test_listener_gauge_counts_subscriptions_made_before_init(monkeypatch):
    """Enabling metrics late still reports live listeners, never a negative count."""
    for name in ("ACTIONS_TOTAL", "DISPATCH_DURATION", "LISTENERS"):
        monkeypatch.setattr(metrics, name, None)
    monkeypatch.setattr(metrics, "_metrics_initialized", False)
    monkeypatch.setattr(metrics, "_listener_count", 0)

    store = create_store(_counter_reducer())
    unsubscribe = store.subscribe(lambda: None)

    registry = CollectorRegistry()
    metrics.init_metrics(registry=registry)
    assert registry.get_sample_value("unistore_listeners") == 1.0

    unsubscribe()
    assert registry.get_sample_value("unistore_listeners") == 0.0

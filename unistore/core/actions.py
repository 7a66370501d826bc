"""
Action model for state transitions.

A dispatchable value is one of two variants:
- Action: immutable record with a required `kind` discriminant
- Effect: deferred command executed by the thunk middleware

The dispatch path matches these explicitly by type.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Union

from .errors import InvalidActionError
from .immutable import FrozenDict, freeze, thaw

# Effect body signature: (dispatch, get_state) -> result (may be a coroutine)
EffectFn = Callable[[Callable[[Any], Any], Callable[[], Any]], Any]


@dataclass(frozen=True)
class Action:
    """
    Immutable plain action.

    Fields:
        kind: Discriminant (e.g., "RECEIVE_TEXT", "SELECT_TAB")
        payload: Kind-specific fields (frozen on construction)
    """
    kind: str
    payload: FrozenDict = field(default_factory=FrozenDict)

    def __post_init__(self) -> None:
        if not isinstance(self.kind, str) or not self.kind:
            raise InvalidActionError(f"Action.kind must be a non-empty string, got {self.kind!r}")
        if not isinstance(self.payload, FrozenDict):
            object.__setattr__(self, "payload", freeze(dict(self.payload)))

    def get(self, key: str, default: Any = None) -> Any:
        return self.payload.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.payload[key]

    def to_dict(self) -> dict:
        """Wire form: {"kind": ..., **payload}."""
        out = {"kind": self.kind}
        out.update(thaw(self.payload))
        return out

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Action":
        """
        Parse the wire form of an action.

        Raises:
            InvalidActionError: If data is not a mapping or lacks "kind"
        """
        if not isinstance(data, Mapping):
            raise InvalidActionError(f"action must be a mapping, got {type(data).__name__}")
        if "kind" not in data:
            raise InvalidActionError("action is missing the 'kind' discriminant")
        payload = {k: v for k, v in data.items() if k != "kind"}
        return Action(kind=data["kind"], payload=freeze(payload))


@dataclass(frozen=True)
class Effect:
    """
    Deferred command.

    The wrapped function is invoked with (dispatch, get_state) by the thunk
    middleware and never reaches a reducer. Async functions return a
    coroutine, which is handed back to the caller of dispatch.
    """
    run: EffectFn
    name: str = ""

    def __post_init__(self) -> None:
        if not callable(self.run):
            raise InvalidActionError("Effect.run must be callable")
        if not self.name:
            object.__setattr__(self, "name", getattr(self.run, "__name__", "effect"))


Dispatchable = Union[Action, Effect]


def action(kind: str, **payload: Any) -> Action:
    """Shorthand constructor: action("SELECT_TAB", key="a")."""
    return Action(kind=kind, payload=freeze(payload))


def effect(fn: EffectFn) -> Effect:
    """Decorator turning a (dispatch, get_state) function into an Effect."""
    return Effect(run=fn)


def describe(item: Any) -> str:
    """Short label for logs and metrics."""
    if isinstance(item, Action):
        return item.kind
    if isinstance(item, Effect):
        return f"<effect {item.name}>"
    return f"<{type(item).__name__}>"

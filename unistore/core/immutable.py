"""
Persistent values for state trees.

State values are frozen dataclasses, tuples and FrozenDict instances. None of
them expose in-place mutators; every update returns a new value that shares
untouched children with the original. FrozenDict freezes its values on the way
in, so a nested dict or list can never be reached through one.
"""

from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, Iterator, Tuple


class FrozenDict(Mapping):
    """
    Immutable mapping with copy-on-write updates.

    Usage:
        d = FrozenDict(a=1)
        d2 = d.set("b", 2)      # d is unchanged
        d3 = d2.remove("a")
    """

    __slots__ = ("_data", "_hash")

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        data = dict(*args, **kwargs)
        object.__setattr__(self, "_data", {k: freeze(v) for k, v in data.items()})
        object.__setattr__(self, "_hash", None)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("FrozenDict is immutable")

    def __getitem__(self, key: Any) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        if self._hash is None:
            object.__setattr__(self, "_hash", hash(frozenset(self._data.items())))
        return self._hash

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, FrozenDict):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"FrozenDict({self._data!r})"

    def __reduce__(self):
        return (FrozenDict, (self._data,))

    def set(self, key: Any, value: Any) -> "FrozenDict":
        """Return a new FrozenDict with key bound to (a frozen copy of) value."""
        value = freeze(value)
        if key in self._data and self._data[key] is value:
            return self
        data = dict(self._data)
        data[key] = value
        return FrozenDict(data)

    def remove(self, key: Any) -> "FrozenDict":
        """Return a new FrozenDict without key (self if key is absent)."""
        if key not in self._data:
            return self
        data = dict(self._data)
        del data[key]
        return FrozenDict(data)

    def update(self, other: Mapping) -> "FrozenDict":
        """Return a new FrozenDict with the entries of other merged in."""
        if not other:
            return self
        data = dict(self._data)
        data.update(other)
        return FrozenDict(data)


def freeze(obj: Any) -> Any:
    """
    Convert nested dict/list values into their immutable counterparts.

    Rules:
    - dict (and any Mapping that is not already frozen) -> FrozenDict
    - list/tuple -> tuple
    - set -> frozenset
    - everything else is returned as-is (str, numbers, frozen dataclasses)

    Values that are already frozen come back as the same object.
    """
    if isinstance(obj, FrozenDict):
        return obj
    if isinstance(obj, Mapping):
        return FrozenDict(obj)
    if isinstance(obj, (list, tuple)):
        items = tuple(freeze(x) for x in obj)
        if isinstance(obj, tuple) and all(a is b for a, b in zip(items, obj)):
            return obj
        return items
    if isinstance(obj, frozenset):
        return obj
    if isinstance(obj, set):
        return frozenset(freeze(x) for x in obj)
    return obj


def thaw(obj: Any) -> Any:
    """
    Convert frozen values back to plain dict/list, e.g. for JSON output.

    Frozen dataclasses are expanded field by field.
    """
    if isinstance(obj, Mapping):
        return {k: thaw(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [thaw(x) for x in obj]
    if isinstance(obj, frozenset):
        return [thaw(x) for x in obj]
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: thaw(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, Enum):
        return obj.value
    return obj


def changed_keys(old: Mapping, new: Mapping) -> Tuple[str, ...]:
    """Keys whose values differ by reference between two mappings."""
    keys = set(old) | set(new)
    return tuple(sorted(k for k in keys if old.get(k) is not new.get(k)))
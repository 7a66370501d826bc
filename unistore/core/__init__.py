"""
Core primitives for the state container.

This module provides:
- Action / Effect: the two dispatchable variants
- FrozenDict / freeze / thaw: persistent state values
- SliceReducer / combine_reducers: reducer construction and composition
- Canonical: deterministic serialization and state fingerprints
"""

from .actions import Action, Effect, Dispatchable, action, effect, describe
from .immutable import FrozenDict, freeze, thaw, changed_keys
from .reducer import SliceReducer, ReducerFn, combine_reducers
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str, state_fingerprint
from .errors import (
    UnistoreError,
    ReentrantDispatchError,
    InvalidActionError,
    InvalidReducerError,
    MiddlewareError,
    ContractViolationError,
    ContentSourceError,
    ConfigError,
)

__all__ = [
    "Action",
    "Effect",
    "Dispatchable",
    "action",
    "effect",
    "describe",
    "FrozenDict",
    "freeze",
    "thaw",
    "changed_keys",
    "SliceReducer",
    "ReducerFn",
    "combine_reducers",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "state_fingerprint",
    "UnistoreError",
    "ReentrantDispatchError",
    "InvalidActionError",
    "InvalidReducerError",
    "MiddlewareError",
    "ContractViolationError",
    "ContentSourceError",
    "ConfigError",
]

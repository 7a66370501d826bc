"""
Canonical serialization of state trees.

Used for state fingerprints and JSON output. Frozen values are thawed first,
so the same logical state always produces the same bytes.
"""

import hashlib
import json
from typing import Any

from .immutable import thaw


def canonicalize(obj: Any) -> Any:
    """
    Convert a (possibly frozen) nested value to canonical plain form.

    Rules:
    - FrozenDict/dict keys sorted alphabetically
    - tuples converted to lists
    - frozen dataclasses expanded to dicts
    """
    obj = thaw(obj)
    if isinstance(obj, dict):
        return {k: canonicalize(obj[k]) for k in sorted(obj.keys())}
    if isinstance(obj, list):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    """
    Deterministic JSON bytes for hashing.

    Returns:
        UTF-8 encoded JSON bytes
    """
    canon = canonicalize(obj)
    s = json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    """Deterministic JSON string (for display or storage)."""
    return canonical_json_bytes(obj).decode("utf-8")


def state_fingerprint(state: Any) -> str:
    """
    SHA-256 of the canonical state bytes.

    Two states with the same fingerprint are structurally equal.
    """
    return hashlib.sha256(canonical_json_bytes(state)).hexdigest()

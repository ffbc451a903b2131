"""
Helpers for order-independent comparison and hashing of Siren values.

Child collections are compared as multisets: both sides are sorted by a
canonical key and then compared positionally. Hashes of child collections are
combined with a sum so that ordering does not affect the result.

JSON values held by Siren models are deep-frozen on construction: objects
become read-only mappings and arrays become tuples. `thaw_json` turns them
back into plain dicts and lists for serialization.
"""
from __future__ import annotations

import json
import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Hashable, Iterable, Optional, Sequence


def freeze_json(value: Any) -> Any:
    """Deep-freeze a JSON value; rejects non-finite numbers."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_json(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_json(item) for item in value)
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"{value!r} is not a JSON number")
    return value


def thaw_json(value: Any) -> Any:
    """Plain dict/list copy of a frozen JSON value; rejects non-finite numbers."""
    if isinstance(value, Mapping):
        return {key: thaw_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw_json(item) for item in value]
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"{value!r} is not a JSON number")
    return value


def freeze(value: Any) -> Hashable:
    """
    Hashable projection of a JSON value that keeps JSON types apart.

    `true`, `1` and `1.0` encode differently, so they project differently;
    equality, hashing and `canonical_json` agree on every value.
    """
    if value is None:
        return ("null",)
    if isinstance(value, bool):
        return ("bool", value)
    if isinstance(value, int):
        return ("int", value)
    if isinstance(value, float):
        return ("float", repr(value))
    if isinstance(value, str):
        return ("string", value)
    if isinstance(value, Mapping):
        return ("object", frozenset((key, freeze(item)) for key, item in value.items()))
    if isinstance(value, (list, tuple)):
        return ("array", tuple(freeze(item) for item in value))
    return ("other", value)


def same_json(left: Any, right: Any) -> bool:
    return freeze(left) == freeze(right)


def canonical_json(value: Any) -> str:
    """Compact JSON text with sorted keys, used as a sort key for JSON values."""
    return json.dumps(_plain(value), sort_keys=True, separators=(",", ":"), default=repr)


def _plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def unordered_hash(items: Iterable[Any]) -> int:
    return sum(hash(item) for item in items)


def same_members(
        left: Sequence[Any],
        right: Sequence[Any],
        key: Optional[Callable[[Any], Any]] = None,
) -> bool:
    """True when both sequences hold the same elements, ignoring order."""
    if len(left) != len(right):
        return False
    return sorted(left, key=key) == sorted(right, key=key)


def sort_key(value: Any) -> str:
    return value.sort_key()


def ordinal(left: str, right: str) -> int:
    """
    Ordinal comparison returning -1, 0 or 1.

    Python compares str by code point, which matches byte-wise comparison of
    their UTF-8 encodings.
    """
    if left == right:
        return 0
    return -1 if left < right else 1

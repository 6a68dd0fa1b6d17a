"""Semantic equality for specification payloads.

The API server defaults and normalizes fields, so a stored spec can differ
from the submitted one only in representation. These helpers treat a
missing key, ``None``, ``[]`` and ``{}`` as the same empty value.
"""

from __future__ import annotations

from typing import Any


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (dict, list, tuple)) and len(value) == 0)


def semantic_equal(a: Any, b: Any) -> bool:
    """Compare two spec payloads structurally, ignoring empty-value artifacts.

    Args:
        a: First payload
        b: Second payload

    Returns:
        True if both payloads carry the same meaning
    """
    if _is_empty(a) and _is_empty(b):
        return True

    if isinstance(a, dict) and isinstance(b, dict):
        for key in a.keys() | b.keys():
            if not semantic_equal(a.get(key), b.get(key)):
                return False
        return True

    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(semantic_equal(x, y) for x, y in zip(a, b))

    # bool is an int subclass; True must not equal 1 in a spec
    if isinstance(a, bool) != isinstance(b, bool):
        return False

    return a == b

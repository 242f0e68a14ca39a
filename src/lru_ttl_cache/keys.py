"""Key canonicalization.

Every key is reduced to a deterministic string before it touches the index.
Primitive keys are stringified directly; structured keys are normalized into
plain JSON data and serialized compactly with sorted object keys so that
field order never matters. Dict keys that are not strings are replaced by
their own canonical string first, and plain objects are encoded by their
instance fields.

Keys of different shapes that serialize identically (``1`` and ``"1"``,
``(1, 2)`` and ``[1, 2]``, ``{1: "a"}`` and ``{"1": "a"}``) map to the same
canonical key. This is an accepted approximation, not structural equality.
"""

from __future__ import annotations

import dataclasses
import json
from enum import Enum
from typing import Any

from pydantic import BaseModel

from .errors import UnsupportedKeyError

_PRIMITIVE_TYPES = (str, int, float, bool)


def _normalize(value: Any, active: set[int]) -> Any:
    if value is None or isinstance(value, _PRIMITIVE_TYPES):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="backslashreplace")
    if isinstance(value, Enum):
        return _normalize(value.value, active)

    marker = id(value)
    if marker in active:
        raise ValueError("self-referencing structure")
    active.add(marker)
    try:
        if isinstance(value, dict):
            return {
                canonicalize_key(item_key): _normalize(item, active)
                for item_key, item in value.items()
            }
        if isinstance(value, (list, tuple)):
            return [_normalize(item, active) for item in value]
        if isinstance(value, (set, frozenset)):
            items = [_normalize(item, active) for item in value]
            return sorted(items, key=_dumps)
        if isinstance(value, BaseModel):
            return _normalize(value.model_dump(mode="json"), active)
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            fields = {
                field.name: getattr(value, field.name)
                for field in dataclasses.fields(value)
            }
            return _normalize(fields, active)
        if hasattr(value, "__dict__") and not isinstance(value, type):
            return _normalize(vars(value), active)
        # UUID, datetime, Decimal, paths and similar scalar-like values.
        return str(value)
    finally:
        active.discard(marker)


def _dumps(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"))


def canonicalize_key(key: Any) -> str:
    """Return the canonical string identity for a cache key.

    Args:
        key: Any primitive or structured key

    Returns:
        Deterministic string used as the index key

    Raises:
        UnsupportedKeyError: If a structured key refers to itself
            (for example, a list that contains itself)
    """
    if isinstance(key, str):
        return key
    if isinstance(key, _PRIMITIVE_TYPES):
        return str(key)
    if isinstance(key, bytes):
        return key.decode("utf-8", errors="backslashreplace")
    try:
        return _dumps(_normalize(key, set()))
    except (RecursionError, ValueError) as exc:
        raise UnsupportedKeyError(key, str(exc)) from exc

"""Compact JSON encoding and factory-based decoding.

``to_json`` produces the same text a browser's ``JSON.stringify`` would for
plain data: no whitespace, keys in insertion order, non-ASCII left as is.
``from_json`` hands the decoded values, in order, to a caller-supplied
factory instead of guessing a constructor.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Sequence, TypeVar

import pydantic_core

T = TypeVar("T")


def to_json(value: Any) -> str:
    """Serialize ``value`` to compact JSON text.

    Pydantic models and dataclasses are serialized through their fields.

    Raises:
        pydantic_core.PydanticSerializationError: If ``value`` contains an
            unserializable object.
    """
    return pydantic_core.to_json(value, inf_nan_mode="null").decode("utf-8")


def from_json(factory: Callable[[list[Any]], T], text: str) -> T:
    """Decode ``text`` and build an instance from its values.

    Object values are passed in key order, array elements in index order.

    Returns:
        Whatever ``factory(values)`` returns.

    Raises:
        json.JSONDecodeError: If ``text`` is not valid JSON.
        ValueError: If the top-level value is not an object or array.
    """
    obj = json.loads(text)
    if isinstance(obj, dict):
        values = list(obj.values())
    elif isinstance(obj, list):
        values = obj
    else:
        raise ValueError(f"Expected a JSON object or array, got: {text[:200]}")
    return factory(values)


def positional(constructor: Callable[..., T]) -> Callable[[Sequence[Any]], T]:
    """Adapt a positional constructor into a ``from_json`` factory."""

    def factory(values: Sequence[Any]) -> T:
        return constructor(*values)

    return factory

"""JSON helpers: compact encoding and prototype-based decoding."""

from __future__ import annotations

import dataclasses
import json
import math
from typing import Any, TypeVar

__all__ = ["encode", "decode"]

T = TypeVar("T")


def _finite(value: Any) -> Any:
    """Replace NaN and infinities with ``None`` throughout *value*."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def _default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _finite(dataclasses.asdict(value))
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode(value: Any) -> str:
    """Serialise *value* to compact JSON, keeping key order.

    Dataclass instances are written as their field mapping.  NaN and
    infinities are written as ``null``.
    """
    return json.dumps(
        _finite(value),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
        default=_default,
    )


def decode(prototype: type[T], text: str) -> T:
    """Parse *text* and attach its fields to a new *prototype* instance.

    ``__init__`` is not called, so the object gets the class's methods and
    properties with exactly the parsed fields as its state.  Frozen
    dataclasses are supported.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object to decode into {prototype.__name__}, "
            f"got {type(data).__name__}"
        )
    obj = prototype.__new__(prototype)
    for key, value in data.items():
        # Bypasses frozen-dataclass __setattr__.
        object.__setattr__(obj, key, value)
    return obj

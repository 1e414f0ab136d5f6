"""Generic object <-> JSON helpers.

    to_json([1, 2, 3])                          -> '[1,2,3]'
    to_json(Rectangle(10, 20))                  -> '{"width":10,"height":20}'
    from_json(Rectangle, '{"width":10,"height":20}').get_area()  -> 200
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from typing import Any, TypeVar

__all__ = ["SerializationError", "to_json", "from_json"]

T = TypeVar("T")


class SerializationError(ValueError):
    """Raised when JSON text cannot be turned into an object."""


def _encode_object(obj: Any) -> Any:
    """``json.dumps`` fallback: serialise an object as its attributes."""
    if isinstance(obj, type):
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    if hasattr(obj, "__dict__"):
        return vars(obj)
    if is_dataclass(obj):
        # slotted dataclasses have no __dict__
        return {f.name: getattr(obj, f.name) for f in fields(obj)}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any, indent: int | None = None) -> str:
    """Return the JSON text of *obj*.

    Without *indent* the output is compact (no whitespace). Key order
    follows insertion order. NaN and infinite floats have no JSON form and
    raise ValueError.
    """
    if indent is None:
        return json.dumps(
            obj,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=_encode_object,
        )
    return json.dumps(
        obj, indent=indent, ensure_ascii=False, allow_nan=False, default=_encode_object
    )


def from_json(cls: type[T], text: str) -> T:
    """Create an instance of *cls* from a JSON object without calling ``__init__``.

    Every key of the parsed object is set as an attribute on the new
    instance, so methods defined on *cls* work on the result. Keys that
    are not fields of *cls* are kept as extra attributes.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )

    obj = cls.__new__(cls)
    for key, value in data.items():
        try:
            # bypasses frozen dataclass guards the same way __init__ would
            object.__setattr__(obj, key, value)
        except (AttributeError, TypeError) as exc:
            raise SerializationError(
                f"Cannot set {key!r} on {cls.__name__}: {exc}"
            ) from exc
    return obj

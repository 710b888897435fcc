"""JSON helpers: compact encoding and decoding onto a given class."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["to_json", "from_json"]

T = TypeVar("T")


def _encode_object(obj: Any) -> Any:
    """Fallback encoder for objects json cannot serialize natively."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    Output matches ``JSON.stringify``: no whitespace between tokens and
    non-ASCII characters kept as-is.

        to_json([1, 2, 3])  # '[1,2,3]'
        to_json(Rectangle(10, 20))  # '{"width":10,"height":20}'
    """
    return json.dumps(
        obj, separators=(",", ":"), ensure_ascii=False, default=_encode_object
    )


def from_json(proto: type[T], text: str) -> T:
    """Parse *text* and bind the resulting mapping to an instance of *proto*.

    ``proto.__init__`` is not called; the parsed keys become instance
    attributes, so *proto*'s methods operate on them directly.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object to bind to {proto.__name__}, "
            f"got {type(data).__name__}"
        )
    instance = proto.__new__(proto)
    instance.__dict__.update(data)
    return instance

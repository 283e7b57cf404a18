"""JSON interchange: serialise values and rebuild typed objects from text.

``to_json`` emits compact JSON (``[1,2,3]``, ``{"width":10,"height":20}``).
Objects are written through their instance attributes, so methods never
reach the output. ``from_json`` does the reverse: the parsed key/value pairs
become attributes (or items, for dict prototypes) of a fresh instance of the
given prototype class, whose ``__init__`` is not run.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

__all__ = ["to_json", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

_COMPACT = (",", ":")


def _encode_object(value: Any) -> Any:
    """``json.dumps`` fallback for values the encoder does not know."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, (set, frozenset)):
        return list(value)
    if hasattr(value, "__dict__"):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, *, indent: int | None = None, sort_keys: bool = False) -> str:
    """Return the JSON text for *value*."""
    separators = _COMPACT if indent is None else None
    return json.dumps(
        value,
        default=_encode_object,
        indent=indent,
        sort_keys=sort_keys,
        separators=separators,
    )


def from_json(proto: type[T] | T, text: str) -> T:
    """Build an instance of *proto* populated from the JSON object in *text*.

    *proto* is a class, or an instance whose class is used. Dict subclasses
    receive the pairs as items, ordinary classes as instance attributes, and
    ``__slots__`` classes through ``setattr``. Raises ``json.JSONDecodeError``
    for malformed text, and ``TypeError`` when the payload is not a JSON
    object or instances of *proto* cannot hold the fields (``object`` itself,
    or slots that do not cover every key).
    """
    cls = proto if isinstance(proto, type) else type(proto)
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    obj = cls.__new__(cls)
    _assign(obj, data)
    logger.debug("Rebuilt %s with fields %s", cls.__name__, sorted(data))
    return obj


def _assign(obj: Any, data: dict[str, Any]) -> None:
    if isinstance(obj, dict):
        obj.update(data)
        return
    if hasattr(obj, "__dict__"):
        obj.__dict__.update(data)
        return
    try:
        for key, value in data.items():
            setattr(obj, key, value)
    except AttributeError as exc:
        raise TypeError(
            f"{type(obj).__name__} instances cannot hold JSON fields: {exc}"
        ) from exc

"""JSON encoding and prototype-backed decoding.

``from_json`` parses a JSON object into a plain record and attaches a
prototype to it: attribute lookups the record cannot satisfy fall through
to the prototype's class, with methods bound to the record. This lets a
decoded ``{"width": 10, "height": 20}`` answer ``area()`` like a
Rectangle without being constructed as one.
"""

from __future__ import annotations

import dataclasses
import inspect
import json
from typing import Any

from selectorkit.errors import NotAnObjectError

__all__ = ["ProtoRecord", "from_json", "prototype_of", "to_json"]


class ProtoRecord:
    """Parsed JSON fields delegating everything else to a prototype.

    The prototype lives in a name-mangled slot so that every parsed key,
    including ``prototype``, stays readable as a plain attribute. Use
    prototype_of() to get at it.
    """

    __slots__ = ("__prototype", "__dict__")

    def __init__(self, prototype: Any, fields: dict[str, Any]) -> None:
        self.__prototype = prototype
        self.__dict__.update(fields)

    def __getattr__(self, name: str) -> Any:
        # Only reached when the record itself has no such attribute.
        if name.startswith("__") or name == "_ProtoRecord__prototype":
            raise AttributeError(name)
        owner = _owner(self.__prototype)
        try:
            attr = inspect.getattr_static(owner, name)
        except AttributeError:
            raise AttributeError(
                f"{owner.__name__!s} record has no attribute {name!r}"
            ) from None
        if hasattr(attr, "__get__"):
            return attr.__get__(self, owner)
        return attr

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProtoRecord):
            return NotImplemented
        return self.__prototype is other.__prototype and vars(self) == vars(other)

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"ProtoRecord[{_owner(self.__prototype).__name__}]({fields})"


def prototype_of(record: ProtoRecord) -> Any:
    """Return the prototype *record* delegates to."""
    return record._ProtoRecord__prototype


def _owner(prototype: Any) -> type:
    return prototype if isinstance(prototype, type) else type(prototype)


def _encode_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, ProtoRecord):
        return dict(vars(value))
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, indent: int | None = None) -> str:
    """Return the JSON text for *value*.

    Output is compact unless *indent* is given. Dataclasses and decoded
    records are written as their fields; methods are never part of the output.
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(value, default=_encode_default, separators=separators, indent=indent)


def from_json(prototype: Any, text: str) -> ProtoRecord:
    """Decode a JSON object and attach *prototype*'s behaviour to it.

    *prototype* is a class, or an instance whose class is used. Raises
    NotAnObjectError when the JSON is not an object; malformed text raises
    json.JSONDecodeError.
    """
    params = json.loads(text)
    if not isinstance(params, dict):
        raise NotAnObjectError(params)
    return ProtoRecord(prototype, params)

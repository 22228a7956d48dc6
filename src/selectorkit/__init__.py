"""selectorkit: fluent CSS selector builder plus small object helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from selectorkit.builder import SelectorBuilder, css_selector_builder
from selectorkit.errors import (
    DuplicatePartError,
    NotAnObjectError,
    PartOrderError,
    SelectorError,
    UnknownPartError,
)
from selectorkit.jsonproto import ProtoRecord, from_json, prototype_of, to_json
from selectorkit.model.part import Combinator, PartKind
from selectorkit.selector import Combination, Renderable, Selector
from selectorkit.shapes import Rectangle

__all__ = [
    "__version__",
    "Combination",
    "Combinator",
    "DuplicatePartError",
    "NotAnObjectError",
    "PartKind",
    "PartOrderError",
    "ProtoRecord",
    "Rectangle",
    "Renderable",
    "Selector",
    "SelectorBuilder",
    "SelectorError",
    "UnknownPartError",
    "css_selector_builder",
    "from_json",
    "prototype_of",
    "to_json",
]

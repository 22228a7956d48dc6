"""Selector part kinds, their ranks, and the CSS combinators."""

from __future__ import annotations

from enum import IntEnum, StrEnum

# Rank of a selector that has no parts yet.
NO_RANK = -1


class PartKind(IntEnum):
    """The kinds of part a compound selector is made of.

    The integer value is the rank: parts must be added in non-decreasing
    rank order.
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def singular(self) -> bool:
        """True for kinds that may appear at most once per selector."""
        return self in _SINGULAR

    @property
    def label(self) -> str:
        """Public name of the kind, e.g. ``pseudo-class``."""
        return _LABELS[self]

    def format(self, value: str) -> str:
        """Wrap *value* in this kind's CSS punctuation."""
        prefix, suffix = _PUNCTUATION[self]
        return f"{prefix}{value}{suffix}"

    @classmethod
    def from_name(cls, name: str) -> PartKind:
        """Resolve a part name such as ``class``, ``pseudo-class`` or ``pseudoClass``.

        Raises KeyError for names that match no kind.
        """
        key = name.strip().replace("-", "").replace("_", "").lower()
        return _ALIASES[key]


_SINGULAR = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})

_PUNCTUATION: dict[PartKind, tuple[str, str]] = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}

_LABELS: dict[PartKind, str] = {
    PartKind.ELEMENT: "element",
    PartKind.ID: "id",
    PartKind.CLASS: "class",
    PartKind.ATTRIBUTE: "attr",
    PartKind.PSEUDO_CLASS: "pseudo-class",
    PartKind.PSEUDO_ELEMENT: "pseudo-element",
}

_ALIASES: dict[str, PartKind] = {
    "element": PartKind.ELEMENT,
    "tag": PartKind.ELEMENT,
    "id": PartKind.ID,
    "class": PartKind.CLASS,
    "attr": PartKind.ATTRIBUTE,
    "attribute": PartKind.ATTRIBUTE,
    "pseudoclass": PartKind.PSEUDO_CLASS,
    "pseudoelement": PartKind.PSEUDO_ELEMENT,
}


class Combinator(StrEnum):
    """CSS combinators. ``combine`` accepts any string; these are shorthands."""

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"
    COLUMN = "||"

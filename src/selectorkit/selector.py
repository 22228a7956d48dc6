"""Compound selector accumulator and combinator-joined selectors."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Protocol, runtime_checkable

from selectorkit.errors import DuplicatePartError, PartOrderError
from selectorkit.model.part import NO_RANK, PartKind

logger = logging.getLogger(__name__)


@runtime_checkable
class Renderable(Protocol):
    """Anything that can be rendered to a selector string."""

    def render(self) -> str: ...


class Selector:
    """One compound selector, e.g. ``a#nav.link[href]:hover::after``.

    Parts are appended through the chainable methods. Each method checks
    that singular parts (element, id, pseudo-element) are not repeated and
    that parts arrive in rank order; a rejected call leaves the selector
    unchanged.
    """

    def __init__(self, kind: PartKind | None = None, value: str = "") -> None:
        self.element_value: str | None = None
        self.id_value: str | None = None
        self.classes: list[str] = []
        self.attributes: list[str] = []
        self.pseudo_classes: list[str] = []
        self.pseudo_element_value: str | None = None
        self.last_rank: int = NO_RANK
        if kind is not None:
            self.add(kind, value)

    # --- chainable parts ------------------------------------------------------

    def element(self, value: str) -> Selector:
        return self.add(PartKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.add(PartKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self.add(PartKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self.add(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.add(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.add(PartKind.PSEUDO_ELEMENT, value)

    def add(self, kind: PartKind, value: str) -> Selector:
        """Validate and append one part, returning self for chaining."""
        kind = PartKind(kind)
        if kind.singular and self._singular(kind) is not None:
            logger.debug("Rejected duplicate %s part %r", kind.label, value)
            raise DuplicatePartError(kind)
        if kind < self.last_rank:
            logger.debug(
                "Rejected %s part %r after rank %d", kind.label, value, self.last_rank
            )
            raise PartOrderError(kind, self.last_rank)

        if kind is PartKind.ELEMENT:
            self.element_value = value
        elif kind is PartKind.ID:
            self.id_value = value
        elif kind is PartKind.PSEUDO_ELEMENT:
            self.pseudo_element_value = value
        elif kind is PartKind.CLASS:
            self.classes.append(value)
        elif kind is PartKind.ATTRIBUTE:
            self.attributes.append(value)
        else:
            self.pseudo_classes.append(value)
        self.last_rank = int(kind)
        return self

    # --- output ---------------------------------------------------------------

    def parts(self) -> Iterator[tuple[PartKind, str]]:
        """Yield ``(kind, value)`` pairs in rank order."""
        if self.element_value is not None:
            yield PartKind.ELEMENT, self.element_value
        if self.id_value is not None:
            yield PartKind.ID, self.id_value
        for value in self.classes:
            yield PartKind.CLASS, value
        for value in self.attributes:
            yield PartKind.ATTRIBUTE, value
        for value in self.pseudo_classes:
            yield PartKind.PSEUDO_CLASS, value
        if self.pseudo_element_value is not None:
            yield PartKind.PSEUDO_ELEMENT, self.pseudo_element_value

    def render(self) -> str:
        """Render the selector; an empty selector renders as ``''``."""
        return "".join(kind.format(value) for kind, value in self.parts())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Selector({self.render()!r})"

    def _singular(self, kind: PartKind) -> str | None:
        return getattr(self, _SINGULAR_FIELDS[kind])


_SINGULAR_FIELDS = {
    PartKind.ELEMENT: "element_value",
    PartKind.ID: "id_value",
    PartKind.PSEUDO_ELEMENT: "pseudo_element_value",
}


@dataclass(frozen=True)
class Combination:
    """Two renderables joined by a combinator.

    The combinator is embedded verbatim, surrounded by single spaces.
    A Combination is itself renderable, so combinations nest.
    """

    left: Renderable
    combinator: str
    right: Renderable

    def render(self) -> str:
        return f"{self.left.render()} {self.combinator} {self.right.render()}"

    def __str__(self) -> str:
        return self.render()

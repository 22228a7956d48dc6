"""SelectorBuilder: the facade that starts selectors and combines them."""

from __future__ import annotations

import logging
from typing import Iterable

from selectorkit.errors import UnknownPartError
from selectorkit.model.part import PartKind
from selectorkit.selector import Combination, Renderable, Selector

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Facade for building CSS selectors.

    Every start method returns a new, independent Selector seeded with one
    part. ``combine`` is a pure function of its operands: the builder keeps
    no state between calls, so combinations may be built in any order and
    nested freely.

    Example::

        builder = SelectorBuilder()
        builder.combine(
            builder.element("div").id("main"),
            "+",
            builder.element("table").id("data"),
        ).render()
        # 'div#main + table#data'
    """

    def element(self, value: str) -> Selector:
        return Selector(PartKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return Selector(PartKind.ID, value)

    def class_(self, value: str) -> Selector:
        return Selector(PartKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return Selector(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector(PartKind.PSEUDO_ELEMENT, value)

    def combine(
        self, left: Renderable, combinator: str, right: Renderable
    ) -> Combination:
        """Join two selectors with *combinator*, passed through verbatim."""
        combination = Combination(left=left, combinator=str(combinator), right=right)
        logger.debug("Combined selectors with %r", combination.combinator)
        return combination

    def build(self, parts: Iterable[tuple[PartKind | str, str]]) -> Selector:
        """Build a selector from ``(kind, value)`` pairs applied in order.

        *kind* is a PartKind or a part name (``element``, ``id``, ``class``,
        ``attr``, ``pseudo-class``, ``pseudo-element``).
        """
        selector = Selector()
        for kind, value in parts:
            selector.add(_resolve_kind(kind), value)
        return selector

    def chain(self, first: Renderable, *rest: Renderable | str) -> Renderable:
        """Fold ``first, combinator, selector, combinator, selector...`` with combine.

        Raises ValueError when a combinator has no right-hand selector.
        """
        if len(rest) % 2:
            raise ValueError("chain() expects combinator/selector pairs after the first selector")
        result: Renderable = first
        for i in range(0, len(rest), 2):
            result = self.combine(result, str(rest[i]), rest[i + 1])  # type: ignore[arg-type]
        return result


def _resolve_kind(kind: PartKind | str) -> PartKind:
    if isinstance(kind, PartKind):
        return kind
    try:
        return PartKind.from_name(kind)
    except KeyError:
        raise UnknownPartError(kind) from None


css_selector_builder = SelectorBuilder()

"""Tests for the SelectorBuilder facade."""
from __future__ import annotations

import logging

import pytest

from selectorkit.builder import SelectorBuilder, css_selector_builder
from selectorkit.errors import DuplicatePartError, PartOrderError, UnknownPartError
from selectorkit.model.part import Combinator, PartKind
from selectorkit.selector import Combination, Selector


# ---------------------------------------------------------------------------
# Start methods
# ---------------------------------------------------------------------------


class TestStartMethods:
    @pytest.mark.parametrize(
        ("method", "kind", "expected"),
        [
            ("element", PartKind.ELEMENT, "div"),
            ("id", PartKind.ID, "#div"),
            ("class_", PartKind.CLASS, ".div"),
            ("attr", PartKind.ATTRIBUTE, "[div]"),
            ("pseudo_class", PartKind.PSEUDO_CLASS, ":div"),
            ("pseudo_element", PartKind.PSEUDO_ELEMENT, "::div"),
        ],
    )
    def test_seeds_one_part(self, builder, method: str, kind: PartKind, expected: str) -> None:
        sel = getattr(builder, method)("div")
        assert isinstance(sel, Selector)
        assert sel.last_rank == kind
        assert sel.render() == expected

    def test_each_call_is_independent(self, builder) -> None:
        first = builder.element("div")
        second = builder.element("span")
        first.class_("a")
        assert first is not second
        assert second.render() == "span"

    def test_start_then_chain(self, builder) -> None:
        assert builder.id("main").class_("container").class_("editable").render() == (
            "#main.container.editable"
        )
        assert builder.element("a").attr('href$=".png"').pseudo_class("focus").render() == (
            'a[href$=".png"]:focus'
        )

    def test_start_rank_enforced(self, builder) -> None:
        with pytest.raises(PartOrderError):
            builder.pseudo_class("hover").class_("late")
        with pytest.raises(DuplicatePartError):
            builder.pseudo_element("after").pseudo_element("before")

    def test_module_level_builder(self) -> None:
        assert isinstance(css_selector_builder, SelectorBuilder)
        assert css_selector_builder.element("p").render() == "p"


# ---------------------------------------------------------------------------
# combine
# ---------------------------------------------------------------------------


class TestCombine:
    def test_two_selectors(self, builder) -> None:
        result = builder.combine(
            builder.element("div").id("main"),
            "+",
            builder.element("table").id("data"),
        )
        assert isinstance(result, Combination)
        assert result.render() == "div#main + table#data"

    def test_accepts_combinator_enum(self, builder) -> None:
        result = builder.combine(builder.element("ul"), Combinator.CHILD, builder.element("li"))
        assert result.render() == "ul > li"
        assert result.combinator == ">"

    def test_combinator_not_validated(self, builder) -> None:
        result = builder.combine(builder.element("a"), "%%", builder.element("b"))
        assert result.render() == "a %% b"

    def test_nested_right(self, builder) -> None:
        result = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert result.render() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_nested_left(self, builder) -> None:
        left = builder.combine(builder.element("a"), "+", builder.element("b"))
        result = builder.combine(left, "~", builder.element("c"))
        assert result.render() == "a + b ~ c"

    def test_independent_of_earlier_calls(self, builder) -> None:
        for _ in range(3):
            builder.combine(builder.element("x"), ">", builder.element("y"))
        unrelated = builder.combine(builder.id("q"), "+", builder.class_("r"))
        result = builder.combine(
            builder.combine(builder.element("a"), "+", builder.element("b")),
            "~",
            builder.element("c"),
        )
        assert result.render() == "a + b ~ c"
        assert result.render() == "a + b ~ c"
        assert unrelated.render() == "#q + .r"

    def test_render_is_repeatable(self, builder) -> None:
        result = builder.combine(builder.element("a"), ">", builder.element("b"))
        assert result.render() == result.render() == "a > b"

    def test_operands_rendered_at_render_time(self, builder) -> None:
        left = builder.element("a")
        result = builder.combine(left, ">", builder.element("b"))
        left.class_("late")
        assert result.render() == "a.late > b"

    def test_logs_combination(self, builder, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="selectorkit.builder"):
            builder.combine(builder.element("a"), "+", builder.element("b"))
        assert any("'+'" in r.getMessage() for r in caplog.records)


# ---------------------------------------------------------------------------
# build / chain
# ---------------------------------------------------------------------------


class TestBuild:
    def test_from_names(self, builder) -> None:
        sel = builder.build([("element", "a"), ("class", "x"), ("pseudo-class", "hover")])
        assert sel.render() == "a.x:hover"

    def test_from_kinds(self, builder) -> None:
        sel = builder.build([(PartKind.ID, "main"), (PartKind.PSEUDO_ELEMENT, "before")])
        assert sel.render() == "#main::before"

    def test_empty(self, builder) -> None:
        assert builder.build([]).render() == ""

    def test_unknown_kind(self, builder) -> None:
        with pytest.raises(UnknownPartError):
            builder.build([("tagname", "a")])

    def test_order_enforced(self, builder) -> None:
        with pytest.raises(PartOrderError):
            builder.build([("class", "x"), ("element", "a")])


class TestChain:
    def test_single(self, builder) -> None:
        sel = builder.element("a")
        assert builder.chain(sel) is sel

    def test_folds_left_to_right(self, builder) -> None:
        result = builder.chain(
            builder.element("a"), "+", builder.element("b"), ">", builder.element("c")
        )
        assert isinstance(result, Combination)
        assert isinstance(result.left, Combination)
        assert result.render() == "a + b > c"

    def test_dangling_combinator(self, builder) -> None:
        with pytest.raises(ValueError):
            builder.chain(builder.element("a"), "+")

"""Tests for the CssSelector builder: ordering, uniqueness, combine."""

import logging

import pytest

from selectorkit.selector import (
    Category,
    CombinedSelectorError,
    CssSelector,
    DuplicateSingleton,
    OrderViolation,
    SelectorError,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

# Method name and rendered output for value "v", in category order.
_METHODS = [
    ("element", "v"),
    ("id", "#v"),
    ("class_", ".v"),
    ("attr", "[v]"),
    ("pseudo_class", ":v"),
    ("pseudo_element", "::v"),
]


def _add(selector: CssSelector, method: str, value: str = "v") -> CssSelector:
    return getattr(selector, method)(value)


# ---------------------------------------------------------------------------
# Stringify
# ---------------------------------------------------------------------------


class TestStringify:
    def test_empty_selector(self):
        assert CssSelector().stringify() == ""

    def test_id_and_classes(self):
        s = CssSelector().id("main").class_("container").class_("editable")
        assert s.stringify() == "#main.container.editable"

    def test_element_attr_pseudo_class(self):
        s = CssSelector().element("a").attr('href$=".png"').pseudo_class("focus")
        assert s.stringify() == 'a[href$=".png"]:focus'

    def test_all_categories_in_order(self):
        s = CssSelector()
        for method, _ in _METHODS:
            _add(s, method)
        assert s.stringify() == "".join(rendered for _, rendered in _METHODS)

    def test_repeatable_categories(self):
        s = (
            CssSelector()
            .element("input")
            .class_("a")
            .class_("b")
            .attr("type=text")
            .attr("required")
            .pseudo_class("hover")
            .pseudo_class("not(.c)")
            .pseudo_element("placeholder")
        )
        assert s.stringify() == (
            "input.a.b[type=text][required]:hover:not(.c)::placeholder"
        )

    def test_idempotent(self):
        s = CssSelector().element("p").class_("x")
        assert s.stringify() == s.stringify() == "p.x"

    def test_str_delegates(self):
        s = CssSelector().element("p").id("x")
        assert str(s) == "p#x"

    def test_returns_same_instance(self):
        s = CssSelector()
        assert s.element("a") is s
        assert s.class_("b") is s

    def test_parts_in_append_order(self):
        s = CssSelector().element("a").class_("b")
        assert [p.category for p in s.parts] == [Category.ELEMENT, Category.CLASS]
        assert not s.is_combined

    def test_repr(self):
        s = CssSelector().element("a")
        assert repr(s) == "CssSelector('a', parts=1)"


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


class TestOrderViolation:
    def test_element_after_id(self):
        with pytest.raises(OrderViolation) as exc_info:
            CssSelector().id("x").element("y")
        assert exc_info.value.category is Category.ELEMENT
        assert exc_info.value.previous is Category.ID

    def test_message(self):
        with pytest.raises(OrderViolation, match="element, id, class, attribute"):
            CssSelector().class_("a").id("b")

    @pytest.mark.parametrize(
        "first, second",
        [
            (_METHODS[i][0], _METHODS[j][0])
            for i in range(len(_METHODS))
            for j in range(i)
        ],
    )
    def test_every_backwards_pair(self, first, second):
        s = _add(CssSelector(), first)
        before = s.stringify()
        with pytest.raises(OrderViolation):
            _add(s, second)
        assert s.stringify() == before
        assert len(s.parts) == 1

    def test_compared_against_last_part_only(self):
        s = CssSelector().element("a").pseudo_class("hover")
        with pytest.raises(OrderViolation):
            s.class_("late")

    def test_is_selector_error(self):
        with pytest.raises(SelectorError):
            CssSelector().pseudo_element("after").attr("x")


# ---------------------------------------------------------------------------
# Uniqueness
# ---------------------------------------------------------------------------


class TestDuplicateSingleton:
    @pytest.mark.parametrize("method", ["element", "id", "pseudo_element"])
    def test_second_call_rejected(self, method):
        s = _add(CssSelector(), method, "a")
        with pytest.raises(DuplicateSingleton) as exc_info:
            _add(s, method, "b")
        assert exc_info.value.category.is_singleton
        assert len(s.parts) == 1

    def test_id_twice(self):
        with pytest.raises(DuplicateSingleton, match="more than one time"):
            CssSelector().id("a").id("b")

    def test_order_checked_before_uniqueness(self):
        s = CssSelector().element("a").id("b")
        with pytest.raises(OrderViolation):
            s.element("c")

    def test_builder_usable_after_error(self):
        s = CssSelector().id("a")
        with pytest.raises(DuplicateSingleton):
            s.id("b")
        s.class_("c")
        assert s.stringify() == "#a.c"


# ---------------------------------------------------------------------------
# Combine
# ---------------------------------------------------------------------------


class TestCombine:
    def test_simple(self):
        a = CssSelector().element("div")
        b = CssSelector().element("p")
        assert CssSelector.combine(a, ">", b).stringify() == "div > p"

    def test_descendant_combinator_has_three_spaces(self):
        a = CssSelector().element("ul")
        b = CssSelector().element("li")
        assert CssSelector.combine(a, " ", b).stringify() == "ul   li"

    def test_combinator_not_validated(self):
        a = CssSelector().element("a")
        b = CssSelector().element("b")
        assert CssSelector.combine(a, "", b).stringify() == "a  b"
        assert CssSelector.combine(a, "||", b).stringify() == "a || b"

    def test_nested(self):
        div = CssSelector().element("div").id("main").class_("container").class_("draggable")
        table = CssSelector().element("table").id("data")
        tr = CssSelector().element("tr").pseudo_class("nth-of-type(even)")
        td = CssSelector().element("td").pseudo_class("nth-of-type(even)")
        result = CssSelector.combine(
            div, "+", CssSelector.combine(table, "~", CssSelector.combine(tr, " ", td))
        )
        assert result.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_operands_unchanged(self):
        a = CssSelector().element("a")
        b = CssSelector().class_("b")
        combined = CssSelector.combine(a, "+", b)
        assert combined is not a and combined is not b
        assert a.stringify() == "a"
        assert b.stringify() == ".b"

    def test_combined_state(self):
        combined = CssSelector.combine(
            CssSelector().element("a"), "~", CssSelector().element("b")
        )
        assert combined.is_combined
        assert len(combined.parts) == 1
        assert combined.parts[0].is_opaque
        assert "combined" in repr(combined)

    def test_combine_logs(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="selectorkit.selector.builder"):
            CssSelector.combine(CssSelector().element("a"), "+", CssSelector().element("b"))
        assert "a + b" in caplog.text


class TestCombinedSelectorIsClosed:
    @pytest.mark.parametrize("method", [m for m, _ in _METHODS])
    def test_part_rejected(self, method):
        combined = CssSelector.combine(
            CssSelector().element("a"), "+", CssSelector().element("b")
        )
        with pytest.raises(CombinedSelectorError):
            _add(combined, method)
        assert combined.stringify() == "a + b"

    def test_rejection_is_logged(self, caplog):
        combined = CssSelector.combine(
            CssSelector().element("a"), "+", CssSelector().element("b")
        )
        with caplog.at_level(logging.DEBUG, logger="selectorkit.selector.builder"):
            with pytest.raises(CombinedSelectorError, match="combined selector"):
                combined.class_("c")
        assert "combined selector" in caplog.text

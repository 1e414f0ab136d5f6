"""Stateless entry points that start a new selector per call."""

from __future__ import annotations

from selectorkit.selector.builder import CssSelector

__all__ = ["CssSelectorBuilder", "css_selector_builder"]


class CssSelectorBuilder:
    """Facade over :class:`CssSelector`.

    Each method creates a fresh selector and adds the first part, e.g.
    ``element(v)`` is ``CssSelector().element(v)``.

    Example::

        builder = css_selector_builder
        builder.id("main").class_("container").class_("editable").stringify()
        # => '#main.container.editable'
    """

    def element(self, value: str) -> CssSelector:
        return CssSelector().element(value)

    def id(self, value: str) -> CssSelector:
        return CssSelector().id(value)

    def class_(self, value: str) -> CssSelector:
        return CssSelector().class_(value)

    def attr(self, value: str) -> CssSelector:
        return CssSelector().attr(value)

    def pseudo_class(self, value: str) -> CssSelector:
        return CssSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> CssSelector:
        return CssSelector().pseudo_element(value)

    def combine(
        self, selector1: CssSelector, combinator: str, selector2: CssSelector
    ) -> CssSelector:
        return CssSelector.combine(selector1, combinator, selector2)


css_selector_builder = CssSelectorBuilder()

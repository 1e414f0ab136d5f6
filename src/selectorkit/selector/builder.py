"""Chainable CSS selector builder.

A selector is assembled from parts in a fixed order:

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              may occur several times

Two selectors are joined with a combinator (``' '``, ``'+'``, ``'~'``,
``'>'``) through :meth:`CssSelector.combine`, which yields a new selector
holding the combined text as a single opaque part.
"""

from __future__ import annotations

import logging

from selectorkit.selector.errors import (
    CombinedSelectorError,
    DuplicateSingleton,
    OrderViolation,
)
from selectorkit.selector.model import Category, Part

__all__ = ["CssSelector"]

logger = logging.getLogger(__name__)


class CssSelector:
    """Mutable selector builder; every part method returns ``self``."""

    def __init__(self) -> None:
        self._parts: list[Part] = []
        self._used: set[Category] = set()

    # --- introspection --------------------------------------------------------

    @property
    def parts(self) -> tuple[Part, ...]:
        return tuple(self._parts)

    @property
    def is_combined(self) -> bool:
        """True for a selector produced by :meth:`combine`."""
        return len(self._parts) == 1 and self._parts[0].is_opaque

    # --- part methods ---------------------------------------------------------

    def element(self, value: str) -> CssSelector:
        return self._append(Category.ELEMENT, value)

    def id(self, value: str) -> CssSelector:
        return self._append(Category.ID, value)

    def class_(self, value: str) -> CssSelector:
        return self._append(Category.CLASS, value)

    def attr(self, value: str) -> CssSelector:
        """Add an attribute part; *value* is given without the brackets."""
        return self._append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> CssSelector:
        return self._append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> CssSelector:
        return self._append(Category.PSEUDO_ELEMENT, value)

    def _append(self, category: Category, value: str) -> CssSelector:
        self._validate(category)
        self._used.add(category)
        self._parts.append(Part.of(category, value))
        return self

    def _validate(self, category: Category) -> None:
        """Raise if *category* cannot follow the parts added so far.

        Nothing is recorded here, so a rejected call leaves the selector
        exactly as it was.
        """
        if self.is_combined:
            logger.debug("Rejected %s part on combined selector", category.value)
            raise CombinedSelectorError(category)

        if self._parts:
            previous = self._parts[-1].category
            if previous is not None and category.order < previous.order:
                logger.debug(
                    "Rejected %s part after %s part", category.value, previous.value
                )
                raise OrderViolation(category, previous)

        if category.is_singleton and category in self._used:
            logger.debug("Rejected repeated %s part", category.value)
            raise DuplicateSingleton(category)

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Render the selector text.

        Parts are concatenated in the order they were added, with no
        separators. A combined selector returns its precomputed text.
        """
        if self.is_combined:
            return self._parts[0].rendered
        return "".join(part.rendered for part in self._parts)

    # --- composition ----------------------------------------------------------

    @staticmethod
    def combine(
        selector1: CssSelector, combinator: str, selector2: CssSelector
    ) -> CssSelector:
        """Join two selectors as ``"<selector1> <combinator> <selector2>"``.

        The combinator is surrounded by exactly one space on each side, so
        the descendant combinator ``" "`` shows up as three spaces.
        """
        rendered = f"{selector1.stringify()} {combinator} {selector2.stringify()}"
        combined = CssSelector()
        combined._parts = [Part.opaque(rendered)]
        logger.debug("Combined selector: %r", rendered)
        return combined

    # --- dunder helpers -------------------------------------------------------

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        kind = "combined" if self.is_combined else f"parts={len(self._parts)}"
        return f"CssSelector({self.stringify()!r}, {kind})"

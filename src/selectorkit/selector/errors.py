"""Selector builder error types."""

from __future__ import annotations

from selectorkit.selector.model import Category


class SelectorError(Exception):
    """Base error for a rejected selector-part call."""

    def __init__(self, message: str, category: Category | None = None) -> None:
        self.category = category
        super().__init__(message)


class OrderViolation(SelectorError):
    """Raised when a part would be placed before the previous part's category."""

    def __init__(self, category: Category, previous: Category) -> None:
        self.previous = previous
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            category,
        )


class DuplicateSingleton(SelectorError):
    """Raised when element, id or pseudo-element is used a second time."""

    def __init__(self, category: Category) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more than one time "
            "inside the selector",
            category,
        )


class CombinedSelectorError(SelectorError):
    """Raised when a part is added to a selector produced by combine()."""

    def __init__(self, category: Category) -> None:
        super().__init__(
            f"Cannot add a {category.value} part to a combined selector",
            category,
        )

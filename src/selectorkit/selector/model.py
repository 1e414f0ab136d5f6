"""Selector model: the Category enum and the Part dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """One of the six kinds of compound-selector part.

    Members are declared in the order they must appear inside a selector:
        element, id, class, attribute, pseudo-class, pseudo-element
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def order(self) -> int:
        """Position of this category in the fixed part ordering."""
        return _ORDER.index(self)

    @property
    def is_singleton(self) -> bool:
        """Whether the category may occur at most once per selector."""
        return self in _SINGLETONS

    def render(self, value: str) -> str:
        """Wrap *value* verbatim in this category's prefix and suffix."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_ORDER: tuple[Category, ...] = tuple(Category)

_SINGLETONS = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})

_AFFIXES: dict[Category, tuple[str, str]] = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}


@dataclass(frozen=True)
class Part:
    """A single rendered fragment of a selector.

    ``category`` is None for the opaque part a combined selector holds.
    """

    category: Category | None
    rendered: str

    @classmethod
    def of(cls, category: Category, value: str) -> Part:
        return cls(category=category, rendered=category.render(value))

    @classmethod
    def opaque(cls, rendered: str) -> Part:
        return cls(category=None, rendered=rendered)

    @property
    def is_opaque(self) -> bool:
        return self.category is None

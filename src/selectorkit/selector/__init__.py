from selectorkit.selector.builder import CssSelector
from selectorkit.selector.errors import (
    CombinedSelectorError,
    DuplicateSingleton,
    OrderViolation,
    SelectorError,
)
from selectorkit.selector.facade import CssSelectorBuilder, css_selector_builder
from selectorkit.selector.model import Category, Part

__all__ = [
    "Category",
    "Part",
    "CssSelector",
    "CssSelectorBuilder",
    "css_selector_builder",
    "SelectorError",
    "OrderViolation",
    "DuplicateSingleton",
    "CombinedSelectorError",
]

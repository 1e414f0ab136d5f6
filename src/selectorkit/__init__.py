"""selectorkit -- CSS selector builder, rectangle and JSON object helpers."""

from selectorkit.selector import CssSelector, css_selector_builder
from selectorkit.serialization import SerializationError, from_json, to_json
from selectorkit.shapes import Rectangle

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CssSelector",
    "css_selector_builder",
    "Rectangle",
    "to_json",
    "from_json",
    "SerializationError",
]

"""CLI command: selectorkit build -- assemble a selector from part tokens."""

from __future__ import annotations

import sys
from typing import Callable, Sequence

import click

from selectorkit.selector import CssSelector, SelectorError

# Token kind -> CssSelector method that adds the part.
_PART_METHODS: dict[str, Callable[[CssSelector, str], CssSelector]] = {
    "element": CssSelector.element,
    "id": CssSelector.id,
    "class": CssSelector.class_,
    "attr": CssSelector.attr,
    "pseudo-class": CssSelector.pseudo_class,
    "pseudo-element": CssSelector.pseudo_element,
}


class TokenError(ValueError):
    """Raised when the token sequence is not a valid selector description."""


def build_from_tokens(tokens: Sequence[str]) -> CssSelector:
    """Build a selector from ``kind=value`` tokens and combinator tokens.

    Consecutive part tokens form one compound selector; any token without
    ``=`` is a combinator joining the compounds on either side. The chain
    is combined from the right, like nested ``combine`` calls.
    """
    compounds: list[CssSelector] = []
    combinators: list[str] = []
    current: CssSelector | None = None

    for token in tokens:
        kind, sep, value = token.partition("=")
        if not sep:
            if current is None:
                raise TokenError(f"Combinator {token!r} must follow a selector part")
            compounds.append(current)
            combinators.append(token)
            current = None
            continue
        method = _PART_METHODS.get(kind)
        if method is None:
            known = ", ".join(_PART_METHODS)
            raise TokenError(f"Unknown part kind {kind!r} (expected one of: {known})")
        current = method(current if current is not None else CssSelector(), value)

    if current is None:
        raise TokenError("Selector must end with a selector part")
    compounds.append(current)

    result = compounds[-1]
    for selector, combinator in zip(reversed(compounds[:-1]), reversed(combinators)):
        result = CssSelector.combine(selector, combinator, result)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Build a CSS selector from part tokens and print it.

    Parts are written as KIND=VALUE where KIND is one of element, id,
    class, attr, pseudo-class, pseudo-element. Any other token is a
    combinator; quote a single space for the descendant combinator.

    \b
    Example:
        selectorkit build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    try:
        selector = build_from_tokens(tokens)
    except (SelectorError, TokenError) as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())

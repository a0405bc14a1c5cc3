"""CLI command: cssforge build -- compose a selector from kind:value parts."""

from __future__ import annotations

import logging
import sys

import click

from cssforge.builder.selector import Selector
from cssforge.config import BuilderConfig
from cssforge.errors import CompositionError

COMBINATOR_WORDS = {
    "descendant": " ",
    "child": ">",
    "adjacent": "+",
    "sibling": "~",
}

_FRAGMENT_METHODS = {
    "element": Selector.element,
    "id": Selector.id,
    "class": Selector.class_,
    "attr": Selector.attr,
    "pseudo-class": Selector.pseudo_class,
    "pseudo-element": Selector.pseudo_element,
}


def build_selector(parts: list[str], config: BuilderConfig) -> Selector:
    """Apply *parts* left to right and return the resulting selector.

    Raises ``ValueError`` for a malformed part and
    :class:`CompositionError` when a part breaks a selector rule.
    """
    result: Selector | None = None
    symbol: str | None = None
    current = Selector(config=config)

    for part in parts:
        if part in COMBINATOR_WORDS:
            result = _join(result, symbol, current, config)
            symbol = COMBINATOR_WORDS[part]
            current = Selector(config=config)
            continue
        kind, sep, value = part.partition(":")
        method = _FRAGMENT_METHODS.get(kind)
        if not sep or method is None:
            raise ValueError(
                f"Invalid part {part!r}: expected kind:value with kind one of "
                + ", ".join(_FRAGMENT_METHODS)
                + ", or a combinator word ("
                + ", ".join(COMBINATOR_WORDS)
                + ")"
            )
        method(current, value)

    return _join(result, symbol, current, config)


def _join(
    left: Selector | None, symbol: str | None, right: Selector, config: BuilderConfig
) -> Selector:
    if left is None or symbol is None:
        return right
    return Selector(config=config).combine(left, symbol, right)


@click.command()
@click.argument("parts", nargs=-1, required=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def build(parts: tuple[str, ...], verbose: bool) -> None:
    """Compose a selector from PARTS and print it.

    Each part is kind:value (element, id, class, attr, pseudo-class,
    pseudo-element) or one of the combinator words descendant, child,
    adjacent, sibling.

    Example: cssforge build element:div id:main child element:p
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = BuilderConfig()
    try:
        selector = build_selector(list(parts), config)
    except (ValueError, CompositionError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())

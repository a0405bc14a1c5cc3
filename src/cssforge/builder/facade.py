"""Stateless entry points: each call starts a fresh :class:`Selector`."""

from __future__ import annotations

from cssforge.builder.selector import Selector
from cssforge.config import BuilderConfig

__all__ = [
    "element",
    "id_",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "stringify",
]


def element(name: str, *, config: BuilderConfig | None = None) -> Selector:
    return Selector(config=config).element(name)


def id_(name: str, *, config: BuilderConfig | None = None) -> Selector:
    return Selector(config=config).id(name)


def class_(name: str, *, config: BuilderConfig | None = None) -> Selector:
    return Selector(config=config).class_(name)


def attr(expr: str, *, config: BuilderConfig | None = None) -> Selector:
    return Selector(config=config).attr(expr)


def pseudo_class(name: str, *, config: BuilderConfig | None = None) -> Selector:
    return Selector(config=config).pseudo_class(name)


def pseudo_element(name: str, *, config: BuilderConfig | None = None) -> Selector:
    return Selector(config=config).pseudo_element(name)


def combine(
    left: Selector, symbol: str, right: Selector, *, config: BuilderConfig | None = None
) -> Selector:
    """Join two built selectors with *symbol* into a new selector.

    ``combine(element("ul"), ">", element("li"))`` renders as ``ul > li``.
    """
    return Selector(config=config).combine(left, symbol, right)


def stringify() -> str:
    """Render an empty selector; always ``""``."""
    return Selector().stringify()

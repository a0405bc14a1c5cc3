"""cssforge model layer -- public type re-exports."""

from cssforge.model.rectangle import Rectangle, make_rectangle
from cssforge.model.token import (
    COMBINATORS,
    SINGLETON_KINDS,
    Token,
    TokenKind,
    split_groups,
)

__all__ = [
    # token
    "TokenKind",
    "Token",
    "COMBINATORS",
    "SINGLETON_KINDS",
    "split_groups",
    # rectangle
    "Rectangle",
    "make_rectangle",
]

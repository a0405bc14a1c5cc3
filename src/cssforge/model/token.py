"""Token model: the typed fragments a selector is built from."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Kind of a selector fragment.

    The integer rank fixes where a fragment may appear inside a compound
    group: element, id, class, attribute, pseudo-class, pseudo-element.
    Combinators have no rank; they separate groups.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"
    COMBINATOR = "combinator"

    @property
    def rank(self) -> int | None:
        return _RANKS.get(self)

    @property
    def is_singleton(self) -> bool:
        """True for kinds that may occur at most once per compound group."""
        return self in SINGLETON_KINDS


_RANKS: dict[TokenKind, int] = {
    TokenKind.ELEMENT: 0,
    TokenKind.ID: 1,
    TokenKind.CLASS: 2,
    TokenKind.ATTRIBUTE: 3,
    TokenKind.PSEUDO_CLASS: 4,
    TokenKind.PSEUDO_ELEMENT: 5,
}

SINGLETON_KINDS = frozenset({
    TokenKind.ELEMENT,
    TokenKind.ID,
    TokenKind.PSEUDO_ELEMENT,
})

# Descendant, child, adjacent sibling, general sibling.
COMBINATORS = frozenset({" ", ">", "+", "~"})

_PREFIXES: dict[TokenKind, str] = {
    TokenKind.ELEMENT: "",
    TokenKind.ID: "#",
    TokenKind.CLASS: ".",
    TokenKind.PSEUDO_CLASS: ":",
    TokenKind.PSEUDO_ELEMENT: "::",
}


@dataclass(frozen=True)
class Token:
    """One selector fragment: a kind tag plus its opaque text."""

    kind: TokenKind
    value: str

    @property
    def is_combinator(self) -> bool:
        return self.kind is TokenKind.COMBINATOR

    @property
    def symbol(self) -> str:
        """Combinator symbol with surrounding whitespace removed.

        Whitespace-only values are the descendant combinator, ``" "``.
        """
        return self.value.strip() or " "

    def render(self) -> str:
        if self.kind is TokenKind.ATTRIBUTE:
            return f"[{self.value}]"
        if self.kind is TokenKind.COMBINATOR:
            symbol = self.symbol
            return " " if symbol == " " else f" {symbol} "
        return _PREFIXES[self.kind] + self.value

    def __str__(self) -> str:
        return self.render()


def split_groups(tokens: tuple[Token, ...] | list[Token]) -> list[list[Token]]:
    """Split *tokens* into compound groups at combinator boundaries.

    Empty groups are kept so callers can detect leading, trailing or
    adjacent combinators.
    """
    groups: list[list[Token]] = [[]]
    for token in tokens:
        if token.is_combinator:
            groups.append([])
        else:
            groups[-1].append(token)
    return groups

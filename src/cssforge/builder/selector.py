"""Selector builder: accumulates typed fragments into a complex selector.

Example:
    Selector().element("a").attr('href$=".png"').pseudo_class("focus")
    renders as ``a[href$=".png"]:focus``.
"""

from __future__ import annotations

import logging
from typing import Iterator

from cssforge.config import DEFAULT_CONFIG, BuilderConfig
from cssforge.errors import CompositionError
from cssforge.model.token import Token, TokenKind, split_groups
from cssforge.validation.rules import check_combinator_symbols
from cssforge.validation.validator import RuleFunc, validate_or_raise

logger = logging.getLogger(__name__)


class Selector:
    """Chainable builder for one complex selector.

    Every mutator validates the whole candidate token sequence before
    committing it.  A call that raises :class:`CompositionError` leaves the
    builder unchanged, so it can keep being used.
    """

    def __init__(
        self,
        tokens: list[Token] | tuple[Token, ...] | None = None,
        config: BuilderConfig | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self._tokens: list[Token] = []
        if tokens:
            self._commit(list(tokens))

    # --- fragments -------------------------------------------------------------

    def element(self, name: str) -> Selector:
        return self._append(Token(TokenKind.ELEMENT, name))

    def id(self, name: str) -> Selector:
        return self._append(Token(TokenKind.ID, name))

    def class_(self, name: str) -> Selector:
        return self._append(Token(TokenKind.CLASS, name))

    def attr(self, expr: str) -> Selector:
        return self._append(Token(TokenKind.ATTRIBUTE, expr))

    def pseudo_class(self, name: str) -> Selector:
        return self._append(Token(TokenKind.PSEUDO_CLASS, name))

    def pseudo_element(self, name: str) -> Selector:
        return self._append(Token(TokenKind.PSEUDO_ELEMENT, name))

    def combine(self, left: Selector, symbol: str, right: Selector) -> Selector:
        """Append *left*, a combinator carrying *symbol*, then *right*.

        The operands' tokens are copied; neither operand is modified.
        """
        for operand in (left, right):
            if not isinstance(operand, Selector):
                raise TypeError(
                    f"combine() expects Selector operands, got {type(operand).__name__}"
                )
        return self._extend(
            [*left._tokens, Token(TokenKind.COMBINATOR, symbol), *right._tokens]
        )

    # --- output ----------------------------------------------------------------

    def stringify(self) -> str:
        return "".join(token.render() for token in self._tokens)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"Selector({self.stringify()!r})"

    # --- inspection ------------------------------------------------------------

    @property
    def tokens(self) -> tuple[Token, ...]:
        return tuple(self._tokens)

    @property
    def is_empty(self) -> bool:
        return not self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def groups(self) -> Iterator[tuple[Token, ...]]:
        """Yield the compound groups in order."""
        if not self._tokens:
            return
        for group in split_groups(self._tokens):
            yield tuple(group)

    def copy(self) -> Selector:
        """Return an independent builder holding the same tokens."""
        clone = Selector(config=self.config)
        clone._tokens = list(self._tokens)
        return clone

    # --- internals -------------------------------------------------------------

    def _append(self, token: Token) -> Selector:
        return self._extend([token])

    def _extend(self, new_tokens: list[Token]) -> Selector:
        self._commit([*self._tokens, *new_tokens])
        return self

    def _commit(self, candidate: list[Token]) -> None:
        try:
            validate_or_raise(candidate, extra_rules=self._extra_rules())
        except CompositionError as exc:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "Rejected %s: %s", "".join(t.render() for t in candidate), exc
                )
            raise
        self._tokens = candidate

    def _extra_rules(self) -> list[RuleFunc]:
        if self.config.strict_combinators:
            return [check_combinator_symbols]
        return []

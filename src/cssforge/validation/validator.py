"""Checks a token sequence against the selector composition rules."""

from __future__ import annotations

from typing import Callable, Sequence

from cssforge.errors import CompositionError
from cssforge.model.token import Token
from cssforge.validation.rules import ALL_RULES, Violation


RuleFunc = Callable[[Sequence[Token]], list[Violation]]


def validate(
    tokens: Sequence[Token], extra_rules: list[RuleFunc] | None = None
) -> list[Violation]:
    """List what *tokens* breaks, standard rules first, then *extra_rules*."""
    rules = [*ALL_RULES, *(extra_rules or [])]
    return [violation for rule in rules for violation in rule(tokens)]


def validate_or_raise(
    tokens: Sequence[Token], extra_rules: list[RuleFunc] | None = None
) -> None:
    """Raise :class:`CompositionError` if *tokens* breaks any rule."""
    violations = validate(tokens, extra_rules=extra_rules)
    if violations:
        raise CompositionError.from_violations(violations)

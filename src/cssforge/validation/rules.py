"""Composition rules for selector token sequences.

Each rule is a function taking a token sequence and returning a list of
Violation objects describing any broken invariant.  Rules that look inside
compound groups walk each group independently.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from cssforge.model.token import COMBINATORS, SINGLETON_KINDS, Token, split_groups


SINGLETON_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


@dataclass(frozen=True)
class Violation:
    """A single broken composition rule.

    Attributes:
        rule: Identifier of the rule that produced this violation.
        message: Human-readable description of the problem.
        group: Zero-based index of the compound group involved, if any.
    """

    rule: str
    message: str
    group: int | None = None

    def __str__(self) -> str:
        location = f" [group={self.group}]" if self.group is not None else ""
        return f"{self.rule}{location}: {self.message}"


# ---------------------------------------------------------------------------
# Sequence rules
# ---------------------------------------------------------------------------


def check_combinators(tokens: Sequence[Token]) -> list[Violation]:
    """Every combinator sits between two non-empty compound groups."""
    if not tokens:
        return []
    groups = split_groups(tokens)
    if len(groups) == 1:
        return []
    violations: list[Violation] = []
    for index, group in enumerate(groups):
        if not group:
            violations.append(
                Violation(
                    rule="check_combinators",
                    message="A combinator must join two non-empty selectors",
                    group=index,
                )
            )
    return violations


def check_combinator_symbols(tokens: Sequence[Token]) -> list[Violation]:
    """Combinators are limited to descendant, child and the two sibling forms."""
    violations: list[Violation] = []
    for token in tokens:
        if token.is_combinator and token.symbol not in COMBINATORS:
            violations.append(
                Violation(
                    rule="check_combinator_symbols",
                    message=(
                        f"Unknown combinator {token.value!r}; expected one of "
                        "' ', '>', '+', '~'"
                    ),
                )
            )
    return violations


# ---------------------------------------------------------------------------
# Compound group rules
# ---------------------------------------------------------------------------


def check_singletons(tokens: Sequence[Token]) -> list[Violation]:
    """At most one element, id and pseudo-element per compound group."""
    violations: list[Violation] = []
    for index, group in enumerate(split_groups(tokens)):
        counts = Counter(t.kind for t in group if t.kind in SINGLETON_KINDS)
        if any(n > 1 for n in counts.values()):
            violations.append(
                Violation(rule="check_singletons", message=SINGLETON_MESSAGE, group=index)
            )
    return violations


def check_order(tokens: Sequence[Token]) -> list[Violation]:
    """Fragment ranks never decrease inside a compound group."""
    violations: list[Violation] = []
    for index, group in enumerate(split_groups(tokens)):
        ranks = [t.kind.rank for t in group]
        if any(later < earlier for earlier, later in zip(ranks, ranks[1:])):
            violations.append(
                Violation(rule="check_order", message=ORDER_MESSAGE, group=index)
            )
    return violations


ALL_RULES = [
    check_combinators,
    check_singletons,
    check_order,
]

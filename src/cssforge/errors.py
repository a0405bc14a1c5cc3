"""Composition error type."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssforge.validation.rules import Violation


class CompositionError(Exception):
    """Raised when a fragment or combine call would break a selector rule."""

    def __init__(self, message: str, violations: list[Violation] | None = None) -> None:
        self.violations = list(violations or [])
        super().__init__(message)

    @classmethod
    def from_violations(cls, violations: list[Violation]) -> CompositionError:
        """Build an error whose message is the first violation's message."""
        return cls(violations[0].message, violations)

from cssforge.validation.rules import (
    ALL_RULES,
    ORDER_MESSAGE,
    SINGLETON_MESSAGE,
    Violation,
    check_combinator_symbols,
    check_combinators,
    check_order,
    check_singletons,
)
from cssforge.validation.validator import RuleFunc, validate, validate_or_raise

__all__ = [
    "ALL_RULES",
    "ORDER_MESSAGE",
    "SINGLETON_MESSAGE",
    "RuleFunc",
    "Violation",
    "check_combinator_symbols",
    "check_combinators",
    "check_order",
    "check_singletons",
    "validate",
    "validate_or_raise",
]

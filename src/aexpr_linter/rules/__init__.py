from .base import BaseRule, LintContext
from .performance_rules import MaxComplexityRule, NoInfiniteLoopsRule, PerformanceWarningsRule
from .style_rules import ConsistentNamingRule, NoMagicNumbersRule
from .syntax_rules import NoDeprecatedFunctionsRule, PreferModernSyntaxRule
from .variable_rules import NoUndefinedVariablesRule, NoUnusedVariablesRule, PreferConstRule

__all__ = [
    "BaseRule",
    "LintContext",
    "NoUndefinedVariablesRule",
    "NoDeprecatedFunctionsRule",
    "PreferModernSyntaxRule",
    "NoInfiniteLoopsRule",
    "MaxComplexityRule",
    "NoUnusedVariablesRule",
    "PreferConstRule",
    "NoMagicNumbersRule",
    "ConsistentNamingRule",
    "PerformanceWarningsRule",
]

from .models import LintingOptions, RuleInfo
from .rules.base import BaseRule


class RuleRegistry:
    """Registry for managing and loading linting rules"""

    def __init__(self):
        self._rules: list[BaseRule] = []
        self._load_builtin_rules()

    def register(self, rule: BaseRule):
        self._rules.append(rule)

    def get_rule(self, rule_id: str) -> BaseRule | None:
        return next((r for r in self._rules if r.rule_id == rule_id), None)

    def get_enabled_rules(self, options: LintingOptions) -> list[BaseRule]:
        return [r for r in self._rules if options.is_enabled(r.rule_id)]

    def catalogue(self, options: LintingOptions) -> list[RuleInfo]:
        """Rule metadata in run order, ``enabled`` taken from ``options``."""
        return [
            RuleInfo(
                id=r.rule_id,
                name=r.name,
                description=r.description,
                severity=r.severity,
                enabled=options.is_enabled(r.rule_id),
                category=r.category,
            )
            for r in self._rules
        ]

    def _load_builtin_rules(self):
        from .rules.performance_rules import (
            MaxComplexityRule,
            NoInfiniteLoopsRule,
            PerformanceWarningsRule,
        )
        from .rules.style_rules import ConsistentNamingRule, NoMagicNumbersRule
        from .rules.syntax_rules import NoDeprecatedFunctionsRule, PreferModernSyntaxRule
        from .rules.variable_rules import (
            NoUndefinedVariablesRule,
            NoUnusedVariablesRule,
            PreferConstRule,
        )

        # Order is part of the output contract: diagnostics are concatenated in this order
        self.register(NoUndefinedVariablesRule())
        self.register(NoDeprecatedFunctionsRule())
        self.register(PreferModernSyntaxRule())
        self.register(NoInfiniteLoopsRule())
        self.register(MaxComplexityRule())
        self.register(NoUnusedVariablesRule())
        self.register(PreferConstRule())
        self.register(NoMagicNumbersRule())
        self.register(ConsistentNamingRule())
        self.register(PerformanceWarningsRule())


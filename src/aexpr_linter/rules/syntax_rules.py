from ..models import Diagnostic, RuleCategory, Severity, TokenType
from .base import BaseRule, LintContext


class NoDeprecatedFunctionsRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "no-deprecated-functions"

    @property
    def name(self) -> str:
        return "No Deprecated Functions"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.DEPRECATED

    @property
    def description(self) -> str:
        return "Warn about deprecated After Effects functions"

    @property
    def auto_fixable(self) -> bool:
        return True

    def check(self, context: LintContext) -> list[Diagnostic]:
        if context.options.allow_deprecated:
            return []

        deprecated = context.profile.deprecated_functions
        issues = []
        for token in context.tokens:
            if token.type != TokenType.IDENTIFIER or token.value not in deprecated:
                continue
            entry = deprecated[token.value]
            issues.append(
                self._create_diagnostic(
                    context,
                    token,
                    f"'{token.value}' is deprecated. {entry.reason}",
                    [entry.replacement],
                )
            )
        return issues


class PreferModernSyntaxRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "prefer-modern-syntax"

    @property
    def name(self) -> str:
        return "Prefer Modern Syntax"

    @property
    def severity(self) -> Severity:
        return Severity.INFO

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.BEST_PRACTICE

    @property
    def description(self) -> str:
        return "Suggest modern JavaScript syntax"

    @property
    def auto_fixable(self) -> bool:
        return True

    def check(self, context: LintContext) -> list[Diagnostic]:
        issues = []
        tokens = context.tokens
        for token, next_token in zip(tokens, tokens[1:]):
            if token.type != TokenType.KEYWORD:
                continue

            if token.value == "var":
                issues.append(
                    self._create_diagnostic(
                        context,
                        token,
                        "Consider using 'let' or 'const' instead of 'var'",
                        ["let", "const"],
                    )
                )
            elif (
                token.value == "function"
                and next_token.type == TokenType.PUNCTUATION
                and next_token.value == "("
            ):
                issues.append(
                    self._create_diagnostic(
                        context,
                        token,
                        "Consider using arrow function syntax",
                        ["() => {}"],
                    )
                )
        return issues

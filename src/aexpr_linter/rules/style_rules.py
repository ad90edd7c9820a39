import re

from ..models import Diagnostic, RuleCategory, Severity, TokenType
from .base import BaseRule, LintContext

CAMEL_CASE_RE = re.compile(r"^[a-z][a-zA-Z0-9]*$")
_SEPARATOR_RE = re.compile(r"[-_](.)")


def to_camel_case(name: str) -> str:
    return _SEPARATOR_RE.sub(lambda m: m.group(1).upper(), name)


def _parse_number(value: str) -> float | None:
    # Mirrors parseFloat on the digit/dot run the tokenizer produces ("1.2.3" -> 1.2)
    match = re.match(r"\d+(?:\.\d*)?", value)
    if not match:
        return None
    return float(match.group())


class NoMagicNumbersRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "no-magic-numbers"

    @property
    def name(self) -> str:
        return "No Magic Numbers"

    @property
    def severity(self) -> Severity:
        return Severity.INFO

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.BEST_PRACTICE

    @property
    def description(self) -> str:
        return "Avoid magic numbers in expressions"

    def check(self, context: LintContext) -> list[Diagnostic]:
        allowed = context.profile.allowed_numbers
        issues = []
        for token in context.tokens:
            if token.type != TokenType.NUMBER or token.value in allowed:
                continue
            number = _parse_number(token.value)
            if number is None or abs(number) <= 1:
                continue
            issues.append(
                self._create_diagnostic(
                    context,
                    token,
                    f"Magic number '{token.value}' should be replaced with a named constant",
                    [f"const CONSTANT_NAME = {token.value}"],
                )
            )
        return issues


class ConsistentNamingRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "consistent-naming"

    @property
    def name(self) -> str:
        return "Consistent Naming"

    @property
    def severity(self) -> Severity:
        return Severity.INFO

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.BEST_PRACTICE

    @property
    def description(self) -> str:
        return "Use consistent variable naming conventions"

    @property
    def quick_fixable(self) -> bool:
        return True

    def check(self, context: LintContext) -> list[Diagnostic]:
        profile = context.profile
        issues = []
        for token in context.tokens:
            if token.type != TokenType.IDENTIFIER or CAMEL_CASE_RE.match(token.value):
                continue
            if token.value in profile.global_functions or token.value in profile.layer_properties:
                continue
            issues.append(
                self._create_diagnostic(
                    context,
                    token,
                    f"'{token.value}' should use camelCase naming convention",
                    [to_camel_case(token.value)],
                )
            )
        return issues

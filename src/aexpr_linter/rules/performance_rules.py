from ..language import COMPLEXITY_KEYWORDS, LOGICAL_OPERATORS, LOOP_KEYWORDS
from ..models import Diagnostic, RuleCategory, Severity, TokenType
from .base import BaseRule, LintContext


class NoInfiniteLoopsRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "no-infinite-loops"

    @property
    def name(self) -> str:
        return "No Infinite Loops"

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.PERFORMANCE

    @property
    def description(self) -> str:
        return "Detect potential infinite loops"

    def check(self, context: LintContext) -> list[Diagnostic]:
        issues = []
        for token in context.tokens:
            if token.type != TokenType.KEYWORD or token.value not in LOOP_KEYWORDS:
                continue
            # Textual check only, a `for` sharing a line with `while(true)` is flagged too
            line = context.line_text(token.line)
            if "while(true)" in line or "while (true)" in line:
                issues.append(
                    self._create_diagnostic(
                        context,
                        token,
                        "Potential infinite loop detected",
                        ["Add a break condition", "Use a counter variable"],
                    )
                )
        return issues


def complexity_score(context: LintContext) -> int:
    score = 1
    for token in context.tokens:
        if token.type == TokenType.KEYWORD and token.value in COMPLEXITY_KEYWORDS:
            score += 1
        elif token.type == TokenType.OPERATOR and token.value in LOGICAL_OPERATORS:
            score += 1
    return score


class MaxComplexityRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "max-complexity"

    @property
    def name(self) -> str:
        return "Maximum Complexity"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.PERFORMANCE

    @property
    def description(self) -> str:
        return "Limit cyclomatic complexity"

    def check(self, context: LintContext) -> list[Diagnostic]:
        limit = context.options.max_complexity
        score = complexity_score(context)
        if score <= limit:
            return []

        last_line = context.lines[-1] if context.lines else ""
        return [
            Diagnostic(
                line=1,
                column=1,
                end_line=len(context.lines),
                end_column=len(last_line) or 1,
                message=f"Expression complexity ({score}) exceeds maximum allowed ({limit})",
                severity=self.severity,
                rule_id=self.rule_id,
                source="entire expression",
                suggestions=("Break down into smaller functions", "Simplify conditional logic"),
            )
        ]


class PerformanceWarningsRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "performance-warnings"

    @property
    def name(self) -> str:
        return "Performance Warnings"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.PERFORMANCE

    @property
    def description(self) -> str:
        return "Warn about potential performance issues"

    def check(self, context: LintContext) -> list[Diagnostic]:
        expensive = context.profile.expensive_functions
        issues = []
        loop_depth = 0

        for token in context.tokens:
            if token.type == TokenType.KEYWORD and token.value in LOOP_KEYWORDS:
                loop_depth += 1
            elif token.type == TokenType.PUNCTUATION and token.value == "}" and loop_depth > 0:
                loop_depth -= 1

            if loop_depth and token.type == TokenType.AE_FUNCTION and token.value in expensive:
                issues.append(
                    self._create_diagnostic(
                        context,
                        token,
                        f"'{token.value}' inside a loop may cause performance issues",
                        ["Move expensive operations outside the loop", "Cache the result"],
                    )
                )
        return issues

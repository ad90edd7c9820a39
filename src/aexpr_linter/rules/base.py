from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..language import LanguageProfile
from ..models import Diagnostic, LintingOptions, RuleCategory, Severity, Token


@dataclass(frozen=True)
class LintContext:
    """Flat program view handed to every rule: the token stream plus raw lines."""

    tokens: list[Token]
    lines: list[str]
    options: LintingOptions
    profile: LanguageProfile

    def line_text(self, line: int) -> str:
        if 1 <= line <= len(self.lines):
            return self.lines[line - 1]
        return ""


class BaseRule(ABC):
    """Abstract base class for all linting rules."""

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g., 'no-magic-numbers')."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable rule name (e.g., 'No Magic Numbers')."""
        pass

    @property
    @abstractmethod
    def severity(self) -> Severity:
        """Default severity for this rule."""
        pass

    @property
    @abstractmethod
    def category(self) -> RuleCategory:
        pass

    @property
    def auto_fixable(self) -> bool:
        """Can the first suggestion be applied unattended (``lint --fix``)?"""
        return False

    @property
    def quick_fixable(self) -> bool:
        """Are this rule's suggestions literal replacements for the flagged span?"""
        return self.auto_fixable

    @property
    def description(self) -> str:
        """Detailed description of what this rule checks."""
        return ""

    @abstractmethod
    def check(self, context: LintContext) -> list[Diagnostic]:
        """Run the check and return found diagnostics."""
        pass

    # Helper method for consistent diagnostic creation
    def _create_diagnostic(
        self,
        context: LintContext,
        token: Token,
        message: str,
        suggestions: list[str] | None = None,
    ) -> Diagnostic:
        """Helper to create a diagnostic spanning ``token`` with rule defaults."""
        return Diagnostic(
            line=token.line,
            column=token.column,
            end_line=token.line,
            end_column=token.end_column,
            message=message,
            severity=self.severity,
            rule_id=self.rule_id,
            source=context.line_text(token.line),
            suggestions=tuple(suggestions) if suggestions is not None else None,
        )

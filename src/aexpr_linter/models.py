from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class TokenType(str, Enum):
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    AE_FUNCTION = "ae-function"
    AE_PROPERTY = "ae-property"
    STRING = "string"
    NUMBER = "number"
    OPERATOR = "operator"
    PUNCTUATION = "punctuation"
    COMMENT = "comment"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class RuleCategory(str, Enum):
    SYNTAX = "syntax"
    PERFORMANCE = "performance"
    DEPRECATED = "deprecated"
    BEST_PRACTICE = "best-practice"


@dataclass(frozen=True)
class Token:
    """A lexical token; ``line`` and ``column`` are 1-based."""

    type: TokenType
    value: str
    line: int
    column: int

    @property
    def end_column(self) -> int:
        return self.column + len(self.value)


@dataclass(frozen=True)
class Diagnostic:
    """A single lint finding"""

    line: int
    column: int
    end_line: int
    end_column: int
    message: str
    severity: Severity
    rule_id: str
    source: str  # text of the offending line
    suggestions: tuple[str, ...] | None = None


@dataclass(frozen=True)
class RuleInfo:
    """Catalogue entry describing a rule for settings UIs"""

    id: str
    name: str
    description: str
    severity: Severity
    enabled: bool
    category: RuleCategory


@dataclass(frozen=True)
class QuickFix:
    """Replace ``[column, end_column)`` on ``line`` with ``new_text``"""

    title: str
    line: int
    column: int
    end_line: int
    end_column: int
    new_text: str


DEFAULT_RULES: Mapping[str, bool] = MappingProxyType({
    "no-undefined-variables": True,
    "no-deprecated-functions": True,
    "prefer-modern-syntax": True,
    "no-infinite-loops": True,
    "max-complexity": True,
    "no-unused-variables": True,
    "prefer-const": True,
    "no-magic-numbers": False,
    "consistent-naming": True,
    "performance-warnings": True,
})


@dataclass(frozen=True)
class LintingOptions:
    rules: Mapping[str, bool] = field(default_factory=lambda: dict(DEFAULT_RULES))
    max_complexity: int = 10
    max_line_length: int = 120
    allow_deprecated: bool = False
    strict_mode: bool = False

    def is_enabled(self, rule_id: str) -> bool:
        return bool(self.rules.get(rule_id, DEFAULT_RULES.get(rule_id, False)))

    def with_rule(self, rule_id: str, enabled: bool) -> "LintingOptions":
        """Return a copy with ``rule_id`` toggled; unknown ids raise KeyError."""
        if rule_id not in DEFAULT_RULES:
            raise KeyError(f"Unknown rule '{rule_id}'")
        return replace(self, rules={**self.rules, rule_id: enabled})

    def with_changes(self, **changes) -> "LintingOptions":
        if "rules" in changes:
            changes["rules"] = {**self.rules, **changes["rules"]}
        return replace(self, **changes)

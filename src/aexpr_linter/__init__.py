"""
AE Expression Linter - diagnostics for After Effects expressions

This package provides:
- A tokenizer for the ES3-like expression dialect
- Ten token-heuristic lint rules with quick-fix suggestions
- A rule catalogue for building settings UIs
"""

__version__ = "0.1.0"

from .autofix import AutoFixEngine
from .engine import LinterEngine, lint_expression
from .language import DEFAULT_PROFILE, LanguageProfile
from .models import (
    Diagnostic,
    LintingOptions,
    QuickFix,
    RuleCategory,
    RuleInfo,
    Severity,
    Token,
    TokenType,
)
from .tokenizer import Tokenizer, tokenize

__all__ = [
    "AutoFixEngine",
    "LinterEngine",
    "lint_expression",
    "DEFAULT_PROFILE",
    "LanguageProfile",
    "Diagnostic",
    "LintingOptions",
    "QuickFix",
    "RuleCategory",
    "RuleInfo",
    "Severity",
    "Token",
    "TokenType",
    "Tokenizer",
    "tokenize",
]

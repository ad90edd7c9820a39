from .base import BaseFormattingRule, FormattingContext
from .indentation import IndentationRule
from .quotes import QuoteStyleRule
from .semicolons import SemicolonRule
from .spacing import BracketSpacingRule, CallParenthesisRule, CommaSpacingRule, OperatorSpacingRule
from .whitespace import FinalNewlineRule, LineEndingRule, TrailingWhitespaceRule
from .wrapping import LineLengthRule

__all__ = [
    "BaseFormattingRule",
    "FormattingContext",
    "LineEndingRule",
    "TrailingWhitespaceRule",
    "IndentationRule",
    "BracketSpacingRule",
    "CallParenthesisRule",
    "OperatorSpacingRule",
    "CommaSpacingRule",
    "SemicolonRule",
    "QuoteStyleRule",
    "LineLengthRule",
    "FinalNewlineRule",
]


def default_rules() -> list[BaseFormattingRule]:
    """The ordered pass list; each pass sees the output of the previous one."""
    return [
        LineEndingRule(),
        TrailingWhitespaceRule(),
        IndentationRule(),
        BracketSpacingRule(),
        CallParenthesisRule(),
        OperatorSpacingRule(),
        CommaSpacingRule(),
        SemicolonRule(),
        QuoteStyleRule(),
        LineLengthRule(),
        FinalNewlineRule(),
    ]

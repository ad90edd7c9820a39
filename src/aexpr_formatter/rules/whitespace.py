import re

from ..models import FormattingOptions
from .base import BaseFormattingRule, FormattingContext


class LineEndingRule(BaseFormattingRule):
    """Normalize CRLF and lone CR to LF."""

    @property
    def name(self) -> str:
        return "line-endings"

    def apply(self, context: FormattingContext) -> None:
        context.source = context.source.replace("\r\n", "\n").replace("\r", "\n")


class TrailingWhitespaceRule(BaseFormattingRule):
    @property
    def name(self) -> str:
        return "trailing-whitespace"

    def enabled(self, options: FormattingOptions) -> bool:
        return options.trim_trailing_whitespace

    def apply(self, context: FormattingContext) -> None:
        context.source = re.sub(r"[ \t\f\v]+$", "", context.source, flags=re.MULTILINE)


class FinalNewlineRule(BaseFormattingRule):
    @property
    def name(self) -> str:
        return "final-newline"

    def enabled(self, options: FormattingOptions) -> bool:
        return options.insert_final_newline

    def apply(self, context: FormattingContext) -> None:
        if not context.source.endswith("\n"):
            context.source += "\n"

import re

from .base import BaseFormattingRule, FormattingContext

# Naive swap: escapes are carried over as-is and literals inside comments are rewritten too
_SINGLE_QUOTED_RE = re.compile(r"'([^'\\\n]*(?:\\.[^'\\\n]*)*)'")
_DOUBLE_QUOTED_RE = re.compile(r'"([^"\\\n]*(?:\\.[^"\\\n]*)*)"')


class QuoteStyleRule(BaseFormattingRule):
    @property
    def name(self) -> str:
        return "quote-style"

    def apply(self, context: FormattingContext) -> None:
        if context.options.quote_style == "single":
            context.source = _DOUBLE_QUOTED_RE.sub(r"'\1'", context.source)
        else:
            context.source = _SINGLE_QUOTED_RE.sub(r'"\1"', context.source)

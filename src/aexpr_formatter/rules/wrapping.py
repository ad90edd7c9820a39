from ..models import FormattingOptions
from .base import BaseFormattingRule, FormattingContext

# In order of preference
BREAK_TOKENS = (",", "&&", "||", "+", "-", "*", "/", "==", "!=")
CONTINUATION_INDENT = "  "


class LineLengthRule(BaseFormattingRule):
    """Break lines longer than ``max_line_length``."""

    @property
    def name(self) -> str:
        return "line-length"

    def enabled(self, options: FormattingOptions) -> bool:
        return options.max_line_length > 0

    def apply(self, context: FormattingContext) -> None:
        options = context.options
        lines = []
        for line in context.source.split("\n"):
            if _width(line, options) <= options.max_line_length:
                lines.append(line)
            else:
                lines.extend(self._break_long_line(line, options))
        context.source = "\n".join(lines)

    def _break_long_line(self, line: str, options: FormattingOptions) -> list[str]:
        content = line.strip()
        indent = line[: len(line) - len(line.lstrip())]
        pieces = []

        while _width(indent, options) + len(content) > options.max_line_length:
            budget = options.max_line_length - _width(indent, options)
            if budget <= 0:
                break
            index = self._find_break(content, budget)
            head, tail = content[:index].rstrip(), content[index:].strip()
            if not head or not tail:
                break
            pieces.append(indent + head)
            indent += CONTINUATION_INDENT
            content = tail

        pieces.append(indent + content)
        return pieces

    @staticmethod
    def _find_break(content: str, budget: int) -> int:
        """Index just past the last preferred token that fits, else a hard break."""
        for token in BREAK_TOKENS:
            index = content.rfind(token, 0, budget)
            if index > 0:
                return index + len(token)
        return budget


def _width(text: str, options: FormattingOptions) -> int:
    return len(text.expandtabs(options.tab_size))

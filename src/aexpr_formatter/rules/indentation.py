import re

from ..utils import is_control_header
from .base import BaseFormattingRule, FormattingContext

_CLOSING = ("}", ")", "]")
_OPENING = ("{", "(", "[")
_INDENTING_KEYWORDS = ("if", "for", "while")
_ELSE_RE = re.compile(r"^(?:\}\s*)?else$")


class IndentationRule(BaseFormattingRule):
    """Re-indent every line from a running bracket level."""

    @property
    def name(self) -> str:
        return "indentation"

    def apply(self, context: FormattingContext) -> None:
        unit = context.options.indent_unit
        level = 0
        pending_statement = False
        lines = []

        for raw in context.source.split("\n"):
            line = raw.lstrip()
            code = line.rstrip()
            if not code:
                lines.append(line)
                continue

            if code.startswith(_CLOSING):
                level = max(0, level - 1)

            # A brace-less control header indents only the statement after it
            extra = 1 if pending_statement and not code.startswith("{") else 0
            pending_statement = False
            lines.append(unit * (level + extra) + line)

            if code.endswith(_OPENING):
                level += 1
            elif _ELSE_RE.match(code) or is_control_header(code, _INDENTING_KEYWORDS):
                pending_statement = True

        context.source = "\n".join(lines)

import re

from ..models import FormattingOptions
from ..utils import is_control_header, mask_literals, restore_literals, split_indent
from .base import BaseFormattingRule, FormattingContext

_STATEMENT_KEYWORD_RE = re.compile(r"\b(?:var|let|const|return|break|continue)\b")
_ASSIGNMENT_RE = re.compile(r"(?<![=!<>])=(?![=>])")
_CALL_RE = re.compile(r"[\w$]\s*\(.*\)")
_FUNCTION_RE = re.compile(r"\bfunction\b")
_TRAILING_COMMENT_RE = re.compile(r"[ \t]*\x00(\d+)\x00$")
# `) {`, `else {` ... followed by a single statement and the closing brace
_INLINE_BLOCK_RE = re.compile(
    r"^(?P<head>.*(?:\)|\b(?:else|do|try|finally))\s*\{\s*)(?P<body>[^{}]*?)(?P<tail>\s*\})$"
)
_TERMINATORS = (";", "{", "}", "(", ",", ":")
_CONTINUATION_CHARS = "+-*/%=<>&|^!?."


def is_statement(code: str) -> bool:
    return bool(
        _STATEMENT_KEYWORD_RE.search(code)
        or _ASSIGNMENT_RE.search(code)
        or _CALL_RE.search(code)
    )


class SemicolonRule(BaseFormattingRule):
    """Terminate statement lines with a semicolon."""

    @property
    def name(self) -> str:
        return "semicolons"

    def enabled(self, options: FormattingOptions) -> bool:
        return options.semicolons

    def apply(self, context: FormattingContext) -> None:
        context.source = "\n".join(self._terminate(line) for line in context.source.split("\n"))

    def _terminate(self, line: str) -> str:
        indent, body = split_indent(line)
        if not body or body.startswith(("//", "/*")):
            return line

        masked, literals = mask_literals(body.rstrip())
        trailing = body[len(body.rstrip()):]
        comment = ""
        match = _TRAILING_COMMENT_RE.search(masked)
        if match and literals[int(match.group(1))].startswith("//"):
            masked, comment = masked[: match.start()], masked[match.start():]

        code = self._terminate_code(masked)
        if code is None:
            return line
        return indent + restore_literals(code + comment, literals) + trailing

    @staticmethod
    def _terminate_code(code: str) -> str | None:
        """Return ``code`` with a semicolon added, or None when it needs none."""
        if not code:
            return None

        if code.endswith("}"):
            match = _INLINE_BLOCK_RE.match(code)
            if not match:
                return None
            inner = match.group("body")
            if not inner or inner.endswith(_TERMINATORS) or not is_statement(inner):
                return None
            return match.group("head") + inner + ";" + match.group("tail")

        if code.endswith(")"):
            # call statements only; control headers and unbalanced lines are left alone
            unbalanced = code.count("(") != code.count(")")
            if unbalanced or is_control_header(code) or _FUNCTION_RE.search(code):
                return None
            return code + ";" if _CALL_RE.search(code) else None

        if code.endswith(_TERMINATORS):
            return None
        if code[-1] in _CONTINUATION_CHARS:
            return None
        return code + ";" if is_statement(code) else None

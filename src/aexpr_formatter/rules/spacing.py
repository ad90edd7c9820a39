import re

from ..models import FormattingOptions
from ..utils import apply_text_transformation, ends_with_operand
from .base import BaseFormattingRule, FormattingContext

# Longest first: alternation order decides which operator wins
BINARY_OPERATORS = (
    ">>>=", "===", "!==", ">>>", "<<=", ">>=",
    "==", "!=", "<=", ">=", "=>", "&&", "||",
    "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=",
    "++", "--", "<<", ">>",
    "+", "-", "*", "/", "%", "=", "<", ">", "&", "|", "^",
)
_OPERATOR_RE = re.compile(
    r"[ \t]*(" + "|".join(re.escape(op) for op in BINARY_OPERATORS) + r")[ \t]*"
)
_UPDATE_OPERATORS = ("++", "--")
_SIGN_OPERATORS = ("+", "-")
# `1.5e` right before a sign: the sign belongs to the exponent
_EXPONENT_RE = re.compile(r"(?:^|[^\w$.])\d[\d.]*[eE]$")
_NOT_RE = re.compile(r"!(?!=)[ \t]+")
_SPACE_RUN_RE = re.compile(r"(?<=\S) {2,}(?=\S)")

_CALL_RE = re.compile(r"([A-Za-z_$][\w$]*)[ \t]+\(")
# Keywords whose "(" is not a call
_NON_CALL_KEYWORDS = frozenset(
    ("if", "for", "while", "switch", "catch", "function", "return", "typeof", "in", "else", "do", "case")
)
_COMMA_RE = re.compile(r"[ \t]*,[ \t]*")


class BracketSpacingRule(BaseFormattingRule):
    """One space inside non-empty object braces and array-literal brackets."""

    @property
    def name(self) -> str:
        return "bracket-spacing"

    def enabled(self, options: FormattingOptions) -> bool:
        return options.bracket_spacing

    def apply(self, context: FormattingContext) -> None:
        context.source = apply_text_transformation(context.source, self._space_brackets)

    @staticmethod
    def _space_brackets(code: str) -> str:
        out = []
        spaced_stack: list[bool] = []

        for i, char in enumerate(code):
            if char in "{[":
                # a[0] is indexing, not an array literal
                spaced = char == "{" or not ends_with_operand(code[:i])
                spaced_stack.append(spaced)
                out.append(char)
                following = code[i + 1 : i + 2]
                if spaced and following and not following.isspace() and following not in "}]":
                    out.append(" ")
            elif char in "}]":
                spaced = spaced_stack.pop() if spaced_stack else char == "}"
                preceding = code[i - 1] if i else ""
                if spaced and preceding and not preceding.isspace() and preceding not in "{[":
                    out.append(" ")
                out.append(char)
            else:
                out.append(char)

        return "".join(out)


class CallParenthesisRule(BaseFormattingRule):
    """Remove whitespace between a callee and its opening parenthesis."""

    @property
    def name(self) -> str:
        return "call-parenthesis"

    def apply(self, context: FormattingContext) -> None:
        def transform(code: str) -> str:
            def repl(match: re.Match) -> str:
                if match.group(1) in _NON_CALL_KEYWORDS:
                    return match.group(0)
                return f"{match.group(1)}("

            return _CALL_RE.sub(repl, code)

        context.source = apply_text_transformation(context.source, transform)


class OperatorSpacingRule(BaseFormattingRule):
    """Exactly one space around binary operators, none after unary ones."""

    @property
    def name(self) -> str:
        return "operator-spacing"

    def apply(self, context: FormattingContext) -> None:
        context.source = apply_text_transformation(context.source, self._space_operators)

    @staticmethod
    def _space_operators(code: str) -> str:
        def repl(match: re.Match) -> str:
            op = match.group(1)
            before = code[: match.start()]
            operand_before = ends_with_operand(before)
            if op in _SIGN_OPERATORS and match.group(0) == op and _EXPONENT_RE.search(before):
                return op
            if op in _UPDATE_OPERATORS and operand_before:
                return op  # postfix
            if op in _UPDATE_OPERATORS or (op in _SIGN_OPERATORS and not operand_before):
                lead = "" if not before.strip() or before.rstrip()[-1] in "([{!" else " "
                return lead + op  # prefix
            return f" {op} "

        code = _OPERATOR_RE.sub(repl, code)
        code = _SPACE_RUN_RE.sub(" ", code)
        return _NOT_RE.sub("!", code)


class CommaSpacingRule(BaseFormattingRule):
    @property
    def name(self) -> str:
        return "comma-spacing"

    def apply(self, context: FormattingContext) -> None:
        context.source = apply_text_transformation(
            context.source, lambda code: _COMMA_RE.sub(", ", code)
        )

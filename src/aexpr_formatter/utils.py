import re
from typing import Callable

# String literals and // comments on a single line
LITERAL_PATTERN = re.compile(r'''(//.*|"(?:\\.|[^"\\])*"|'(?:\\.|[^'\\])*')''')
_PLACEHOLDER_RE = re.compile(r"\x00(\d+)\x00")
_PREFIX_KEYWORD_RE = re.compile(r"\b(?:return|typeof|case|in|of|throw|new|else|do|void)$")
_HEADER_START_RE = re.compile(r"^(?:\}\s*)?(?:else\s+)?(?P<keyword>if|for|while|switch|catch|with)\s*\(")

CONTROL_KEYWORDS = ("if", "for", "while", "switch", "catch", "with")


def mask_literals(code: str) -> tuple[str, list[str]]:
    """Replace literals with ``\\x00N\\x00`` placeholders so regexes only see code."""
    literals: list[str] = []

    def stash(match: re.Match) -> str:
        literals.append(match.group(0))
        return f"\x00{len(literals) - 1}\x00"

    return LITERAL_PATTERN.sub(stash, code), literals


def restore_literals(code: str, literals: list[str]) -> str:
    return _PLACEHOLDER_RE.sub(lambda m: literals[int(m.group(1))], code)


def split_indent(line: str) -> tuple[str, str]:
    body = line.lstrip()
    return line[: len(line) - len(body)], body


def ends_with_operand(code: str) -> bool:
    """True when ``code`` ends in something a binary operator or index can follow."""
    code = code.rstrip()
    if not code or _PREFIX_KEYWORD_RE.search(code):
        return False
    last = code[-1]
    return last.isalnum() or last in "_$)]\x00"


def is_control_header(code: str, keywords: tuple[str, ...] = CONTROL_KEYWORDS) -> bool:
    """True when the parenthesis opened after a control keyword closes at the end of ``code``.

    `if (a)` is a header, `if (a) foo()` is not.
    """
    masked, _ = mask_literals(code.strip())
    match = _HEADER_START_RE.match(masked)
    if not match or match.group("keyword") not in keywords:
        return False

    depth = 0
    for index in range(match.end() - 1, len(masked)):
        char = masked[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return index == len(masked) - 1
    return False


def apply_text_transformation(source: str, transform: Callable[[str], str]) -> str:
    """Run ``transform`` over the code of each line.

    Indentation, string literals and // comments are left untouched, and the
    transform cannot add whitespace at either end of a line.
    """
    lines = []
    for line in source.split("\n"):
        indent, body = split_indent(line)
        if not body:
            lines.append(line)
            continue
        masked, literals = mask_literals(body)
        new_body = transform(masked).lstrip(" \t")
        if not body[-1].isspace():
            new_body = new_body.rstrip(" \t")
        lines.append(indent + restore_literals(new_body, literals))
    return "\n".join(lines)

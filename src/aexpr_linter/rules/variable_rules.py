from ..language import DECLARATION_KEYWORDS
from ..models import Diagnostic, RuleCategory, Severity, Token, TokenType
from .base import BaseRule, LintContext

MAX_SUGGESTIONS = 3


def levenshtein_distance(a: str, b: str) -> int:
    previous = list(range(len(a) + 1))
    for j, char_b in enumerate(b, start=1):
        current = [j]
        for i, char_a in enumerate(a, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(min(current[i - 1] + 1, previous[i] + 1, previous[i - 1] + cost))
        previous = current
    return previous[-1]


def similar_names(target: str, candidates) -> list[str]:
    """Candidates containing/contained in ``target`` or within edit distance 2."""
    target_lower = target.lower()
    matches = []
    for candidate in candidates:
        candidate_lower = candidate.lower()
        if candidate_lower in target_lower or target_lower in candidate_lower:
            matches.append(candidate)
        elif levenshtein_distance(target_lower, candidate_lower) <= 2:
            matches.append(candidate)
    return matches[:MAX_SUGGESTIONS]


def _is_declaration(token: Token) -> bool:
    return token.type == TokenType.KEYWORD and token.value in DECLARATION_KEYWORDS


def declared_on_line(tokens: list[Token]) -> dict[str, Token]:
    """Names declared by var/let/const, taking the next identifier on the same line."""
    declared: dict[str, Token] = {}
    for i, token in enumerate(tokens):
        if not _is_declaration(token):
            continue
        for candidate in tokens[i + 1:]:
            if candidate.line != token.line:
                break
            if candidate.type == TokenType.IDENTIFIER:
                declared.setdefault(candidate.value, candidate)
                break
    return declared


def declared_immediately(tokens: list[Token]) -> dict[str, Token]:
    """Names declared by a keyword directly followed by an identifier token."""
    declared: dict[str, Token] = {}
    for token, next_token in zip(tokens, tokens[1:]):
        if (
            token.type == TokenType.KEYWORD
            and token.value in DECLARATION_KEYWORDS
            and next_token.type == TokenType.IDENTIFIER
        ):
            declared[next_token.value] = next_token
    return declared


class NoUndefinedVariablesRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "no-undefined-variables"

    @property
    def name(self) -> str:
        return "No Undefined Variables"

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.SYNTAX

    @property
    def description(self) -> str:
        return "Detect usage of undefined variables"

    @property
    def quick_fixable(self) -> bool:
        return True

    def check(self, context: LintContext) -> list[Diagnostic]:
        profile = context.profile
        # Insertion ordered so suggestions are stable
        defined = dict.fromkeys(declared_on_line(context.tokens))
        defined.update(dict.fromkeys(profile.builtins))

        issues = []
        for token in context.tokens:
            if token.type != TokenType.IDENTIFIER:
                continue
            if (
                token.value in defined
                or token.value in profile.global_functions
                or token.value in profile.deprecated_functions
            ):
                continue
            issues.append(
                self._create_diagnostic(
                    context,
                    token,
                    f"'{token.value}' is not defined",
                    similar_names(token.value, defined),
                )
            )
        return issues


class NoUnusedVariablesRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "no-unused-variables"

    @property
    def name(self) -> str:
        return "No Unused Variables"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.BEST_PRACTICE

    @property
    def description(self) -> str:
        return "Detect unused variable declarations"

    def check(self, context: LintContext) -> list[Diagnostic]:
        declared = declared_immediately(context.tokens)

        # The declaring identifier itself is an identifier token, so it counts as a use.
        used = {
            t.value
            for t in context.tokens
            if t.type == TokenType.IDENTIFIER and t.value in declared
        }

        return [
            self._create_diagnostic(
                context,
                token,
                f"'{name}' is declared but never used",
                [f"Remove '{name}' declaration"],
            )
            for name, token in declared.items()
            if name not in used
        ]


class PreferConstRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "prefer-const"

    @property
    def name(self) -> str:
        return "Prefer Const"

    @property
    def severity(self) -> Severity:
        return Severity.INFO

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.BEST_PRACTICE

    @property
    def description(self) -> str:
        return "Prefer const over var for constants"

    @property
    def auto_fixable(self) -> bool:
        return True

    def check(self, context: LintContext) -> list[Diagnostic]:
        tokens = context.tokens
        assignments: dict[str, int] = {}
        # identifier followed by "=" with something after it
        for token, next_token, _ in zip(tokens, tokens[1:], tokens[2:]):
            if token.type == TokenType.IDENTIFIER and next_token.value == "=":
                assignments[token.value] = assignments.get(token.value, 0) + 1

        issues = []
        for token, next_token in zip(tokens, tokens[1:]):
            if not (
                token.type == TokenType.KEYWORD
                and token.value == "var"
                and next_token.type == TokenType.IDENTIFIER
            ):
                continue
            if assignments.get(next_token.value, 0) <= 1:
                issues.append(
                    self._create_diagnostic(
                        context,
                        token,
                        f"'{next_token.value}' is never reassigned. Use 'const' instead of 'var'",
                        ["const"],
                    )
                )
        return issues

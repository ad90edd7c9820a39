from typing import Callable

from .models import Diagnostic, QuickFix
from .registry import RuleRegistry


def _keyword_suggestions(diagnostic: Diagnostic) -> list[str]:
    # Arrow-function advice is not a replacement for the `function` keyword
    return [s for s in diagnostic.suggestions or () if s.isidentifier()]


class AutoFixEngine:
    """Turn diagnostic suggestions into span replacements and apply them"""

    def __init__(self, registry: RuleRegistry | None = None):
        self.registry = registry or RuleRegistry()
        # rule_id -> filter keeping only suggestions usable as replacement text
        self._replacements: dict[str, Callable[[Diagnostic], list[str]]] = {
            "prefer-modern-syntax": _keyword_suggestions,
        }

    def can_fix(self, rule_id: str) -> bool:
        """Is ``rule_id`` fixed unattended by ``apply_fixes``?"""
        rule = self.registry.get_rule(rule_id)
        return rule is not None and rule.auto_fixable

    def quick_fixes(self, diagnostic: Diagnostic) -> list[QuickFix]:
        """One "Replace with" action per suggestion, for the user to pick from."""
        rule = self.registry.get_rule(diagnostic.rule_id)
        if rule is None or not rule.quick_fixable:
            return []
        select = self._replacements.get(diagnostic.rule_id, lambda d: list(d.suggestions or ()))
        return [
            QuickFix(
                title=f"Replace with '{text}'",
                line=diagnostic.line,
                column=diagnostic.column,
                end_line=diagnostic.end_line,
                end_column=diagnostic.end_column,
                new_text=text,
            )
            for text in select(diagnostic)
        ]

    def apply_fix(self, source: str, fix: QuickFix) -> str:
        lines = source.split("\n")
        if not 1 <= fix.line <= len(lines):
            return source
        line = lines[fix.line - 1]
        lines[fix.line - 1] = line[: fix.column - 1] + fix.new_text + line[fix.end_column - 1 :]
        return "\n".join(lines)

    def apply_fixes(self, source: str, diagnostics: list[Diagnostic]) -> str:
        """Apply the preferred fix of every auto-fixable diagnostic, skipping overlaps.

        Guesses such as undefined-name spellings are left to ``quick_fixes``.
        """
        fixes = []
        for diagnostic in diagnostics:
            if not self.can_fix(diagnostic.rule_id):
                continue
            candidates = self.quick_fixes(diagnostic)
            if candidates:
                fixes.append(candidates[0])

        # Bottom-up so earlier columns stay valid
        content = source
        last: QuickFix | None = None
        for fix in sorted(fixes, key=lambda f: (f.line, f.column), reverse=True):
            if last is not None and fix.line == last.line and fix.end_column > last.column:
                continue
            content = self.apply_fix(content, fix)
            last = fix
        return content

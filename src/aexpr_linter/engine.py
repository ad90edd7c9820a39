import logging
from dataclasses import replace

from .language import DEFAULT_PROFILE, LanguageProfile
from .models import Diagnostic, LintingOptions, RuleInfo, Severity
from .registry import RuleRegistry
from .rules.base import LintContext
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class LinterEngine:
    """Core engine for linting After Effects expressions"""

    def __init__(
        self,
        options: LintingOptions | None = None,
        profile: LanguageProfile = DEFAULT_PROFILE,
        registry: RuleRegistry | None = None,
    ):
        self.options = options or LintingOptions()
        self.profile = profile
        self.tokenizer = Tokenizer(profile)
        self.registry = registry or RuleRegistry()

    def lint(self, source: str, options: LintingOptions | None = None) -> list[Diagnostic]:
        """Run every enabled rule; results stay in rule order, not position order."""
        options = options or self.options
        context = LintContext(
            tokens=self.tokenizer.tokenize(source),
            lines=source.split("\n"),
            options=options,
            profile=self.profile,
        )

        diagnostics: list[Diagnostic] = []
        for rule in self.registry.get_enabled_rules(options):
            try:
                found = rule.check(context)
            except Exception:
                logger.warning("Rule '%s' failed and was skipped", rule.rule_id, exc_info=True)
                continue
            diagnostics.extend(found)

        if options.strict_mode:
            diagnostics = [_promote(d) for d in diagnostics]
        return diagnostics

    def get_rules(self, options: LintingOptions | None = None) -> list[RuleInfo]:
        return self.registry.catalogue(options or self.options)

    def update_options(self, **changes) -> LintingOptions:
        self.options = self.options.with_changes(**changes)
        return self.options


def _promote(diagnostic: Diagnostic) -> Diagnostic:
    if diagnostic.severity == Severity.INFO:
        return replace(diagnostic, severity=Severity.WARNING)
    return diagnostic


def lint_expression(source: str, options: LintingOptions | None = None) -> list[Diagnostic]:
    return LinterEngine(options).lint(source)

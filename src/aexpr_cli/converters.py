from aexpr_linter.models import Diagnostic

from .models import LintIssue, LintReport, Severity


def diagnostic_to_lint_issue(diagnostic: Diagnostic, file_path: str, auto_fixable: bool = False) -> LintIssue:
    """Convert an internal dataclass diagnostic to an external Pydantic issue"""
    return LintIssue(
        severity=diagnostic.severity.value.upper(),  # dataclass uses 'error', Pydantic uses 'ERROR'
        file_path=file_path,
        line_number=diagnostic.line,
        column=diagnostic.column,
        end_line=diagnostic.end_line,
        end_column=diagnostic.end_column,
        rule_id=diagnostic.rule_id,
        message=diagnostic.message,
        suggestions=list(diagnostic.suggestions or ()),
        auto_fixable=auto_fixable,
    )


def build_report(issues: list[LintIssue]) -> LintReport:
    return LintReport(
        issues=issues,
        total=len(issues),
        errors=sum(1 for i in issues if i.severity == Severity.ERROR),
        warnings=sum(1 for i in issues if i.severity == Severity.WARNING),
        infos=sum(1 for i in issues if i.severity == Severity.INFO),
    )

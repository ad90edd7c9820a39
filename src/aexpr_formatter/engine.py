import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .models import FormatResult, FormatResults, FormattingOptions, TextEdit, TextRange
from .rules import default_rules
from .rules.base import BaseFormattingRule, FormattingContext

logger = logging.getLogger(__name__)

# ";" is also a trigger in editors but never changes anything
ON_TYPE_TRIGGERS = ("}", ")")


class FormatterEngine:
    """Core engine for formatting AE expressions through ordered text passes."""

    def __init__(self, options: Optional[FormattingOptions] = None, rules: Optional[List[BaseFormattingRule]] = None):
        self.options = options or FormattingOptions()
        self.rules: List[BaseFormattingRule] = default_rules() if rules is None else list(rules)

    def add_rule(self, rule: BaseFormattingRule) -> None:
        """Register a new formatting rule after the existing ones."""
        self.rules.append(rule)

    def format_string(self, source: str, options: Optional[FormattingOptions] = None) -> FormatResult:
        """Run every enabled pass; on any failure the input comes back unchanged."""
        options = options or self.options
        context = FormattingContext(source=source, options=options)

        try:
            for rule in self.rules:
                if rule.enabled(options):
                    rule.apply(context)
        except Exception as e:
            logger.error("Formatting failed in pass '%s'", rule.name, exc_info=True)
            return FormatResult(source=source, modified=False, errors=[f"{rule.name}: {e}"])

        return FormatResult(source=context.source, modified=context.source != source)

    def format(self, source: str) -> str:
        return self.format_string(source).source

    def format_document(self, source: str) -> List[TextEdit]:
        lines = source.split("\n")
        full = TextRange(1, 1, len(lines), len(lines[-1]) + 1)
        return self.format_range(source, full)

    def format_range(self, source: str, text_range: TextRange) -> List[TextEdit]:
        """Edits replacing ``text_range`` with its formatted text; empty when unchanged."""
        original = _slice(source, text_range)
        formatted = self.format_string(original).source
        if formatted == original:
            return []
        return [TextEdit(range=text_range, new_text=formatted)]

    def format_on_type(self, source: str, line: int, char: str) -> List[TextEdit]:
        """Reformat ``line`` after a closing bracket was typed; keeps its indentation."""
        lines = source.split("\n")
        if char not in ON_TYPE_TRIGGERS or not 1 <= line <= len(lines):
            return []

        text = lines[line - 1]
        indent = text[: len(text) - len(text.lstrip())]
        result = self.format_string(text.strip(), replace(self.options, insert_final_newline=False))
        if result.errors:
            return []
        formatted = indent + result.source
        if formatted == text:
            return []
        return [TextEdit(range=TextRange(line, 1, line, len(text) + 1), new_text=formatted)]

    def format_files(self, files: List[Path], write: bool = True) -> FormatResults:
        """Batch format multiple files on disk."""
        results = []; modified_count = 0; error_count = 0
        for file_path in files:
            try:
                source = Path(file_path).read_text(encoding="utf-8")
            except OSError as e:
                results.append(FormatResult(source="", modified=False, errors=[str(e)]))
                error_count += 1
                continue
            result = self.format_string(source)
            results.append(result)
            if result.errors:
                error_count += 1
            elif result.modified:
                modified_count += 1
                if write:
                    Path(file_path).write_text(result.source, encoding="utf-8")
        return FormatResults(results=results, total_files=len(files), modified_files=modified_count, error_files=error_count)


def _offset(lines: List[str], line: int, column: int) -> int:
    line = min(max(line, 1), len(lines))
    column = min(max(column, 1), len(lines[line - 1]) + 1)
    return sum(len(text) + 1 for text in lines[: line - 1]) + column - 1


def _slice(source: str, text_range: TextRange) -> str:
    lines = source.split("\n")
    start = _offset(lines, text_range.start_line, text_range.start_column)
    end = _offset(lines, text_range.end_line, text_range.end_column)
    return source[start:end]


def format_expression(source: str, options: Optional[FormattingOptions] = None) -> str:
    return FormatterEngine(options).format(source)

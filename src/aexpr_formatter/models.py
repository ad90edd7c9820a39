from dataclasses import dataclass, field
from typing import List

INDENT_STYLES = ("spaces", "tabs")
QUOTE_STYLES = ("single", "double")


@dataclass(frozen=True)
class FormattingOptions:
    tab_size: int = 2
    insert_spaces: bool = True
    indent_size: int = 2
    max_line_length: int = 80
    insert_final_newline: bool = True
    trim_trailing_whitespace: bool = True
    indent_style: str = "spaces"
    bracket_spacing: bool = True
    semicolons: bool = True
    quote_style: str = "double"

    def __post_init__(self):
        if self.indent_style not in INDENT_STYLES:
            raise ValueError(f"indent_style must be one of {INDENT_STYLES}, got {self.indent_style!r}")
        if self.quote_style not in QUOTE_STYLES:
            raise ValueError(f"quote_style must be one of {QUOTE_STYLES}, got {self.quote_style!r}")
        if self.indent_size < 0 or self.tab_size < 1:
            raise ValueError("indent_size must be >= 0 and tab_size >= 1")

    @property
    def indent_unit(self) -> str:
        if self.indent_style == "tabs" or not self.insert_spaces:
            return "\t"
        return " " * self.indent_size


@dataclass
class FormatResult:
    source: str
    modified: bool
    errors: List[str] = field(default_factory=list)


@dataclass
class FormatResults:
    results: List[FormatResult]
    total_files: int
    modified_files: int
    error_files: int


@dataclass(frozen=True)
class TextRange:
    """1-based positions; ``end_column`` is exclusive."""

    start_line: int
    start_column: int
    end_line: int
    end_column: int


@dataclass(frozen=True)
class TextEdit:
    range: TextRange
    new_text: str

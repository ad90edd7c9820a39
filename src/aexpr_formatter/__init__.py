"""
AE Expression Formatter - option-driven text passes for After Effects expressions
"""

__version__ = "0.1.0"

from .engine import FormatterEngine, format_expression
from .models import FormatResult, FormatResults, FormattingOptions, TextEdit, TextRange

__all__ = [
    "FormatterEngine",
    "format_expression",
    "FormatResult",
    "FormatResults",
    "FormattingOptions",
    "TextEdit",
    "TextRange",
]

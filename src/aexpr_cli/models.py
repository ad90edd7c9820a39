from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Severity(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


class LintIssue(BaseModel):
    severity: Severity
    file_path: str
    line_number: int
    column: int
    end_line: int
    end_column: int
    rule_id: str
    message: str
    suggestions: List[str] = Field(default_factory=list)
    auto_fixable: bool = False


class LintReport(BaseModel):
    issues: List[LintIssue] = Field(default_factory=list)
    total: int = 0
    errors: int = 0
    warnings: int = 0
    infos: int = 0
    fixed_files: Optional[List[str]] = None

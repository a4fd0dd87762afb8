"""Analysis result models."""

from typing import List

from pydantic import BaseModel, Field

from modcheck.models.diagnostic import Diagnostic
from modcheck.models.error import ErrorRecord


class AnalysisReport(BaseModel):
    """Outcome of checking a set of files."""

    files_checked: int = Field(0, description="Number of files parsed and walked")
    diagnostics: List[Diagnostic] = Field(default_factory=list)
    errors: List[ErrorRecord] = Field(default_factory=list)

    @property
    def has_violations(self) -> bool:
        return bool(self.diagnostics)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

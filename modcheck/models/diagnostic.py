"""Diagnostic data models."""

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Severity level of a reported violation."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class Diagnostic(BaseModel):
    """A single violation reported by a check."""

    model_config = ConfigDict(frozen=True)

    file_path: str = Field(..., description="Path of the checked file")
    line: int = Field(..., description="Line number (1-indexed)")
    column: int = Field(..., description="Column number (1-indexed)")
    message_key: str = Field(..., description="Key identifying the violation category")
    args: Tuple[str, ...] = Field(default=(), description="Message arguments")
    check_name: str = Field(..., description="Name of the check that reported it")
    severity: Severity = Field(default=Severity.ERROR, description="Severity level")

    @property
    def sort_key(self) -> Tuple[str, int, int]:
        return (self.file_path, self.line, self.column)

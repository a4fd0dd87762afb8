"""Data models for modcheck."""

from .ast_node import ASTNode, ModifierSet
from .diagnostic import Diagnostic, Severity
from .error import ErrorRecord
from .report import AnalysisReport
from .source_tree import SourceTree

__all__ = [
    # Tree models
    "ASTNode",
    "ModifierSet",
    "SourceTree",
    # Diagnostic models
    "Diagnostic",
    "Severity",
    # Error models
    "ErrorRecord",
    # Result models
    "AnalysisReport",
]

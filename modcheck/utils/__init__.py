"""
Utility modules for modcheck.
"""

from modcheck.utils.logging import (
    get_logger,
    setup_logging,
    LogContext,
    JSONFormatter,
    log_file_checked,
    log_error_with_context,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "LogContext",
    "JSONFormatter",
    "log_file_checked",
    "log_error_with_context",
]

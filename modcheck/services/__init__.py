"""Analysis services package."""

from modcheck.services.messages import MessageBundle
from modcheck.services.diagnostic_sink import (
    DiagnosticSink,
    DiagnosticCollector,
)

__all__ = [
    'MessageBundle',
    'DiagnosticSink',
    'DiagnosticCollector',
]

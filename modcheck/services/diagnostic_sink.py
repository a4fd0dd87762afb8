"""
Diagnostic sinks.

Checks hand every violation to a ``DiagnosticSink``. The collector below
is safe to share between walks running in different threads.
"""

import json
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from modcheck.models import Diagnostic, Severity
from modcheck.services.messages import MessageBundle


class DiagnosticSink(ABC):
    """Receives diagnostics reported by checks."""

    @abstractmethod
    def report(self, diagnostic: Diagnostic) -> None:
        pass


class DiagnosticCollector(DiagnosticSink):
    """Append-only, thread-safe collection of diagnostics."""

    def __init__(self, messages: Optional[MessageBundle] = None):
        self.messages = messages or MessageBundle()
        self._diagnostics: List[Diagnostic] = []
        self._lock = threading.Lock()

    def report(self, diagnostic: Diagnostic) -> None:
        with self._lock:
            self._diagnostics.append(diagnostic)

    def __len__(self) -> int:
        with self._lock:
            return len(self._diagnostics)

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Snapshot of the collected diagnostics ordered by file and position."""
        with self._lock:
            snapshot = list(self._diagnostics)
        return sorted(snapshot, key=lambda d: d.sort_key)

    def count_by_severity(self) -> Dict[Severity, int]:
        counts = {severity: 0 for severity in Severity}
        for diagnostic in self.diagnostics:
            counts[diagnostic.severity] += 1
        return counts

    def render_message(self, diagnostic: Diagnostic) -> str:
        return self.messages.format(diagnostic.message_key, diagnostic.args)

    def render_plain(self) -> List[str]:
        """Render one ``path:line:col: [severity] message [Check]`` line per diagnostic."""
        return [
            f"{d.file_path}:{d.line}:{d.column}: [{d.severity.value}] "
            f"{self.render_message(d)} [{d.check_name}]"
            for d in self.diagnostics
        ]

    def render_json(self) -> str:
        payload = []
        for d in self.diagnostics:
            entry = d.model_dump(mode="json")
            entry["message"] = self.render_message(d)
            payload.append(entry)
        return json.dumps(payload, indent=2)

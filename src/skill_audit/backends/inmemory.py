"""
In-memory audit backend for development and tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from skill_audit.models import LogEntry, Severity

from .base import AuditBackend


@dataclass(frozen=True)
class Submission:
    severity: Severity
    entries: tuple[LogEntry, ...]
    resource: dict[str, Any]


class InMemoryAuditBackend(AuditBackend):
    """Records every submitted batch in order.

    Args:
        name: Log stream name
        fail_with: Exception raised by every submission instead of recording it
    """

    def __init__(self, name: str = "skills_audit", fail_with: Optional[BaseException] = None):
        self.name = name
        self.fail_with = fail_with
        self.submissions: list[Submission] = []

    async def submit_info(self, entries: Sequence[LogEntry], resource: Mapping[str, Any]) -> None:
        self._record(Severity.INFO, entries, resource)

    async def submit_warning(self, entries: Sequence[LogEntry], resource: Mapping[str, Any]) -> None:
        self._record(Severity.WARNING, entries, resource)

    async def submit_error(self, entries: Sequence[LogEntry], resource: Mapping[str, Any]) -> None:
        self._record(Severity.ERROR, entries, resource)

    def _record(self, severity: Severity, entries: Sequence[LogEntry], resource: Mapping[str, Any]) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.submissions.append(Submission(severity, tuple(entries), dict(resource)))

    def clear(self) -> None:
        self.submissions.clear()

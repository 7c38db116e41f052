"""
Audit backend capability.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

from skill_audit.models import LogEntry, Severity


class AuditBackend(ABC):
    """Submits batches of audit entries at one of three severities.

    Each call submits the whole batch or fails as a whole.
    """

    @abstractmethod
    async def submit_info(self, entries: Sequence[LogEntry], resource: Mapping[str, Any]) -> None: ...

    @abstractmethod
    async def submit_warning(self, entries: Sequence[LogEntry], resource: Mapping[str, Any]) -> None: ...

    @abstractmethod
    async def submit_error(self, entries: Sequence[LogEntry], resource: Mapping[str, Any]) -> None: ...

    async def submit(self, severity: Any, entries: Sequence[LogEntry], resource: Mapping[str, Any]) -> None:
        """Route a batch to exactly one submission call.

        Only `Severity` members select warning or error; plain ints, bools and
        anything else go to info.
        """
        if not isinstance(severity, Severity):
            severity = Severity.INFO
        if severity is Severity.WARNING:
            await self.submit_warning(entries, resource)
        elif severity is Severity.ERROR:
            await self.submit_error(entries, resource)
        else:
            await self.submit_info(entries, resource)

"""
Google Cloud Logging audit backend.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence

from google.cloud import logging as gcloud_logging
from google.cloud.logging_v2.resource import Resource

from skill_audit.models import LogEntry, Severity

from .base import AuditBackend

if TYPE_CHECKING:
    from google.cloud.logging import Client as GCloudLoggingClient


def _stringify_labels(labels: Mapping[str, Any]) -> dict[str, str]:
    """Cloud Logging accepts string label values only."""
    return {str(k): v if isinstance(v, str) else str(v) for k, v in labels.items()}


class GCloudAuditBackend(AuditBackend):
    """Writes audit entries to a Cloud Logging log stream.

    Constructing the client resolves credentials and project locally
    (Application Default Credentials when `project` is None); nothing goes over
    the network until the first submission.

    Args:
        name: Log stream name
        project: GCP project ID, or None for the ambient default
        client: Preconfigured `google.cloud.logging.Client`
    """

    def __init__(
        self,
        name: str,
        project: Optional[str] = None,
        client: Optional["GCloudLoggingClient"] = None,
    ):
        self._client = client if client is not None else gcloud_logging.Client(project=project)
        self._logger = self._client.logger(name)
        self.name = name

    async def submit_info(self, entries: Sequence[LogEntry], resource: Mapping[str, Any]) -> None:
        await self._write(entries, resource, Severity.INFO)

    async def submit_warning(self, entries: Sequence[LogEntry], resource: Mapping[str, Any]) -> None:
        await self._write(entries, resource, Severity.WARNING)

    async def submit_error(self, entries: Sequence[LogEntry], resource: Mapping[str, Any]) -> None:
        await self._write(entries, resource, Severity.ERROR)

    async def _write(self, entries: Sequence[LogEntry], resource: Mapping[str, Any], severity: Severity) -> None:
        await asyncio.to_thread(self._commit, entries, resource, severity)

    def _commit(self, entries: Sequence[LogEntry], resource: Mapping[str, Any], severity: Severity) -> None:
        monitored = Resource(type=resource["type"], labels=dict(resource.get("labels", {})))
        batch = self._logger.batch()
        for entry in entries:
            batch.log_text(
                entry.message,
                severity=severity.label,
                labels=_stringify_labels(entry.metadata.labels),
                resource=monitored,
            )
        # one entries.write call; rejected as a whole
        batch.commit(partial_success=False)

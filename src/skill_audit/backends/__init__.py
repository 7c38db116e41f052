"""
Audit backend factory.

Strategy + Factory: the backend kind selects the constructor.
- gcloud: Google Cloud Logging (default)
- inmemory: records submissions locally (development/tests)
"""

from __future__ import annotations

from typing import Callable, Optional

from skill_audit.config import BackendKind, settings
from skill_audit.exceptions import UnsupportedBackendError

from .base import AuditBackend
from .inmemory import InMemoryAuditBackend, Submission


def create_gcloud_backend(name: str, project: Optional[str] = None) -> AuditBackend:
    from .gcloud import GCloudAuditBackend

    return GCloudAuditBackend(name, project=project)


def create_inmemory_backend(name: str, project: Optional[str] = None) -> AuditBackend:
    return InMemoryAuditBackend(name)


_BACKEND_FACTORIES: dict[BackendKind, Callable[[str, Optional[str]], AuditBackend]] = {
    BackendKind.GCLOUD: create_gcloud_backend,
    BackendKind.INMEMORY: create_inmemory_backend,
}


def create_backend(
    name: str,
    project: Optional[str] = None,
    kind: BackendKind | str | None = None,
) -> AuditBackend:
    """
    Build an audit backend bound to a log stream.

    Args:
        name: Log stream name
        project: Backend project, None for default resolution
        kind: gcloud or inmemory; None reads settings.audit_backend

    Raises:
        UnsupportedBackendError: unknown backend kind
    """
    if isinstance(kind, BackendKind):
        return _BACKEND_FACTORIES[kind](name, project)

    kind_str = kind or settings.audit_backend
    try:
        backend_enum = BackendKind(str(kind_str).lower())
    except ValueError:
        raise UnsupportedBackendError(backend=str(kind_str), supported=[b.value for b in BackendKind]) from None

    return _BACKEND_FACTORIES[backend_enum](name, project)


__all__ = [
    "AuditBackend",
    "InMemoryAuditBackend",
    "Submission",
    "create_backend",
    "create_gcloud_backend",
    "create_inmemory_backend",
]

"""
Exception hierarchy for skill_audit.

Only construction-time problems are raised from here. Failures reported by
the logging backend during submission propagate unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence


class AuditLoggingError(Exception):
    """Base class for errors raised by skill_audit itself."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class InvalidContextError(AuditLoggingError):
    """Execution context is absent or lacks correlation_id / workspace_id.

    Raised by `create_logger` before any backend is constructed.
    """

    def __init__(self, *, context: Any, missing: Sequence[str], echo: str) -> None:
        self.context = context
        self.missing = tuple(missing)
        message = f"Provided context is missing {' and '.join(self.missing)}: {echo}"
        super().__init__(
            message,
            code="INVALID_CONTEXT",
            details={"missing": list(self.missing), "context": echo},
        )


class UnsupportedBackendError(AuditLoggingError):
    """Requested audit backend kind has no registered factory."""

    def __init__(self, *, backend: str, supported: Sequence[str]) -> None:
        message = f"Unsupported audit backend: {backend}. Supported: {list(supported)}"
        super().__init__(
            message,
            code="UNSUPPORTED_BACKEND",
            details={"backend": backend, "supported": list(supported)},
        )

"""
skill_audit: audit logging bound to an execution context.

    from skill_audit import Severity, create_logger

    audit = create_logger({"eventId": "e1", "correlationId": "c1", "workspaceId": "w1"})
    await audit.log("hello", Severity.WARNING, {"team": "x"})
"""

from .exceptions import AuditLoggingError, InvalidContextError, UnsupportedBackendError
from .logger import AuditLogger, create_logger
from .models import ExecutionContext, LogEntry, LogEntryMetadata, Severity, merge_labels

__all__ = [
    "AuditLogger",
    "AuditLoggingError",
    "ExecutionContext",
    "InvalidContextError",
    "LogEntry",
    "LogEntryMetadata",
    "Severity",
    "UnsupportedBackendError",
    "create_logger",
    "merge_labels",
]

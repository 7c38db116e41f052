"""
Diagnostic logging for skill_audit.

These are the library's own operational logs, separate from the audit stream
submitted through `skill_audit.create_logger`. Silent until
`configure_logging` is called; written to stderr as console lines or JSON.

Library: structlog + orjson.
"""

from .core import configure_logging, get_logger, reset_logging

__all__ = ["configure_logging", "get_logger", "reset_logging"]

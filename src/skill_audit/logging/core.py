"""
Diagnostic logging pipeline.

Library loggers run through a private structlog pipeline instead of the
global `structlog.configure` state, so a host application's own structlog
setup is untouched. Diagnostics stay silent until `configure_logging` is
called.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

import structlog
from structlog.typing import EventDict, FilteringBoundLogger, WrappedLogger

from .sinks import LogFormat, StreamSink

_METHOD_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "exception": logging.ERROR,
    "critical": logging.CRITICAL,
}

# None: not configured, every event is dropped
_min_level: Optional[int] = None
_sink: Optional[StreamSink] = None


# =============================================================================
# Structlog Processors
# =============================================================================


def drop_below_level(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    if _min_level is None or _METHOD_LEVELS.get(method_name, logging.INFO) < _min_level:
        raise structlog.DropEvent
    return event_dict


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 UTC timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict["logger"] = event_dict.pop("_name", "skill_audit")
    return event_dict


def rename_event_key(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def render_to_sink(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
    """Write to the configured sink. Returns empty to suppress default output."""
    if _sink is not None:
        try:
            _sink.emit(event_dict)
        except Exception:
            pass  # a broken diagnostics stream must not break the caller
    return ""


_PROCESSORS = [
    drop_below_level,
    structlog.stdlib.add_log_level,
    add_timestamp,
    add_logger_name,
    rename_event_key,
    structlog.processors.format_exc_info,
    render_to_sink,
]


class _NopFile:
    def write(self, s: str) -> None:
        pass

    def flush(self) -> None:
        pass


_NOP_FILE = _NopFile()


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Get a structured logger bound to the library pipeline."""
    return structlog.wrap_logger(
        structlog.PrintLogger(file=_NOP_FILE),
        processors=_PROCESSORS,
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        context_class=dict,
        cache_logger_on_first_use=False,
        _name=name or "skill_audit",
    )


def configure_logging(*, level: str | None = None, fmt: str | None = None, stream: Any = None) -> None:
    """
    Turn on diagnostics.

    Arguments left as None fall back to `settings.logging` (SA_LOG_*).

    Args:
        level: Minimum level (DEBUG, INFO, WARNING, ERROR)
        fmt: console or json
        stream: Output stream (default: stderr)
    """
    from skill_audit.config import settings

    global _min_level, _sink

    level = level or settings.logging.level.value
    fmt = fmt or settings.logging.format.value
    log_format: LogFormat = "json" if fmt.lower() == "json" else "console"

    _min_level = getattr(logging, level.upper(), logging.INFO)
    _sink = StreamSink(fmt=log_format, stream=stream)


def reset_logging() -> None:
    """Silence diagnostics again."""
    global _min_level, _sink
    _min_level = None
    _sink = None

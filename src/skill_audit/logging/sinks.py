"""
Diagnostic log sink.
"""

from __future__ import annotations

import sys
from typing import Any, Literal

import orjson
from structlog.typing import EventDict

from .formatters import ConsoleFormatter

LogFormat = Literal["console", "json"]


def orjson_dumps(v: Any) -> str:
    """Fast JSON serialization using orjson."""
    return orjson.dumps(v, default=str, option=orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC).decode()


class StreamSink:
    """Writes diagnostics to a text stream (stderr by default).

    Args:
        fmt: "console" (colored on a tty) or "json" (one object per line)
        stream: Output stream
    """

    def __init__(self, fmt: LogFormat = "console", stream: Any = None):
        self._fmt = fmt
        self._stream = stream or sys.stderr

    def emit(self, event_dict: EventDict) -> None:
        if self._fmt == "json":
            output = orjson_dumps(event_dict)
        else:
            use_color = bool(getattr(self._stream, "isatty", lambda: False)())
            output = ConsoleFormatter.format(event_dict, use_color=use_color)
        self._stream.write(output + "\n")
        self._stream.flush()

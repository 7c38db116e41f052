"""
Console rendering for diagnostics.
"""

from __future__ import annotations

from structlog.typing import EventDict

_RESET = "\033[0m"
_LEVEL_COLORS = {
    "debug": "\033[36m",
    "info": "\033[32m",
    "warning": "\033[33m",
    "error": "\033[31m",
    "critical": "\033[1;31m",
}
_DIM = "\033[2m"


class ConsoleFormatter:
    """One line per event: time, level, logger, message, audit tag, extras.

    Events about an audit stream carry `log_name` and `correlation_id`; they
    are shown as a `[log_name/correlation_id]` tag ahead of the other fields
    so lines for one invocation are easy to pick out.
    """

    AUDIT_KEYS = ("log_name", "correlation_id")
    HIDDEN_KEYS = {"level", "message", "logger", "timestamp"}

    @classmethod
    def format(cls, event_dict: EventDict, *, use_color: bool = False) -> str:
        level = str(event_dict.get("level", "info")).lower()
        clock = str(event_dict.get("timestamp", ""))[11:19]
        level_text = f"{level.upper():<7}"
        if use_color and level in _LEVEL_COLORS:
            level_text = f"{_LEVEL_COLORS[level]}{level_text}{_RESET}"

        parts = [clock, level_text, str(event_dict.get("logger", "skill_audit")), str(event_dict.get("message", ""))]

        tag = "/".join(str(event_dict[k]) for k in cls.AUDIT_KEYS if event_dict.get(k))
        if tag:
            parts.append(f"[{tag}]")

        extras = " ".join(
            f"{k}={v}" for k, v in event_dict.items() if k not in cls.HIDDEN_KEYS and k not in cls.AUDIT_KEYS
        )
        if extras:
            parts.append(f"{_DIM}{extras}{_RESET}" if use_color else extras)

        return " ".join(p for p in parts if p)

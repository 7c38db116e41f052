"""
Audit log data model: execution context, severity, entries.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Severity(IntEnum):
    """Severity of user-facing audit logging.

    Starts at INFO: anything below is debug output meant for the skill author
    only and never reaches the audit stream.
    """

    INFO = 0
    WARNING = 1
    ERROR = 2

    @property
    def label(self) -> str:
        """Cloud Logging severity name."""
        return self.name


class ExecutionContext(BaseModel):
    """Identifies one logical invocation (one incoming event).

    Accepts snake_case names or the camelCase keys used by event payloads.
    Required fields are checked by `create_logger`, not here, so that a bad
    context can still be echoed back in the error.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    event_id: Optional[str] = Field(default=None, alias="eventId")
    correlation_id: Optional[str] = Field(default=None, alias="correlationId")
    workspace_id: Optional[str] = Field(default=None, alias="workspaceId")

    @classmethod
    def coerce(cls, value: Any) -> Optional["ExecutionContext"]:
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        return cls.model_validate(value, from_attributes=True)

    def missing_fields(self) -> list[str]:
        return [name for name in ("correlation_id", "workspace_id") if not getattr(self, name)]

    def to_labels(self) -> dict[str, Optional[str]]:
        return {
            "execution_id": self.event_id,
            "correlation_id": self.correlation_id,
            "workspace_id": self.workspace_id,
        }


def merge_labels(
    factory_labels: Optional[Mapping[str, Any]],
    call_labels: Optional[Mapping[str, Any]],
    context: ExecutionContext,
) -> dict[str, Any]:
    """Merge label maps in precedence order: factory < call < context.

    Context-derived keys always win. A context key with no value (an absent
    event_id) removes that key instead of carrying a null label.
    """
    merged: dict[str, Any] = {}
    merged.update(factory_labels or {})
    merged.update(call_labels or {})
    for key, value in context.to_labels().items():
        if value is None:
            merged.pop(key, None)
        else:
            merged[key] = value
    return merged


@dataclass(frozen=True)
class LogEntryMetadata:
    labels: dict[str, Any]
    resource: dict[str, Any] = field(default_factory=lambda: {"type": "global"})


@dataclass(frozen=True)
class LogEntry:
    message: str
    metadata: LogEntryMetadata

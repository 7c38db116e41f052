"""
Audit logger bound to one execution context.

Usage:
    audit = create_logger(context, labels={"skill": "deploy"})
    await audit.log("deployment started")
    await audit.log(["step 1 done", "step 2 done"], Severity.WARNING)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Sequence, Union

import orjson
from pydantic import ValidationError

from skill_audit.backends import AuditBackend, create_backend
from skill_audit.config import settings
from skill_audit.exceptions import InvalidContextError
from skill_audit.logging import get_logger
from skill_audit.models import ExecutionContext, LogEntry, LogEntryMetadata, Severity, merge_labels

logger = get_logger("skill_audit.logger")

Message = Union[str, Sequence[str]]


def _echo_context(context: Any) -> str:
    if isinstance(context, ExecutionContext):
        context = context.model_dump(by_alias=True, exclude_none=True)
    elif isinstance(context, Mapping):
        context = dict(context)
    return orjson.dumps(context, default=str).decode()


def _invalid_fields(exc: ValidationError) -> list[str]:
    """Field names behind a failed context validation, in declaration order.

    A value that is not a context at all has no field location and counts as
    missing both required fields.
    """
    by_alias = {f.alias or name: name for name, f in ExecutionContext.model_fields.items()}
    found = {by_alias.get(str(err["loc"][0]), str(err["loc"][0])) for err in exc.errors() if err.get("loc")}
    ordered = [name for name in ExecutionContext.model_fields if name in found]
    return ordered or ["correlation_id", "workspace_id"]


class AuditLogger:
    """Submits audit entries tagged with the execution context.

    Holds no state between calls; each `log` builds fresh metadata and entries.
    """

    def __init__(
        self,
        context: ExecutionContext,
        backend: AuditBackend,
        name: str,
        labels: Optional[Mapping[str, Any]] = None,
        resource_type: str = "global",
    ):
        self.context = context
        self.name = name
        self._backend = backend
        self._labels = dict(labels or {})
        self._resource_type = resource_type

    @property
    def labels(self) -> dict[str, Any]:
        return dict(self._labels)

    async def log(
        self,
        msg: Message,
        severity: Severity = Severity.INFO,
        labels: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """
        Log a message or list of messages to the audit stream.

        All entries share one metadata object and go out in a single backend
        call. Backend errors propagate unchanged.

        Args:
            msg: A message, or a sequence of messages (one entry each, in order)
            severity: Audit severity; anything but WARNING or ERROR is logged as INFO
            labels: Per-call labels, overriding factory labels of the same key
        """
        metadata = LogEntryMetadata(
            labels=merge_labels(self._labels, labels, self.context),
            resource={"type": self._resource_type},
        )

        messages = [msg] if isinstance(msg, str) else list(msg)
        if not messages:
            return
        entries = [LogEntry(message=m, metadata=metadata) for m in messages]

        await self._backend.submit(severity, entries, metadata.resource)
        logger.debug(
            "audit_entries_submitted",
            log_name=self.name,
            count=len(entries),
            severity=getattr(severity, "name", str(severity)),
            correlation_id=self.context.correlation_id,
        )


def create_logger(
    context: ExecutionContext | Mapping[str, Any] | None,
    labels: Optional[Mapping[str, Any]] = None,
    name: Optional[str] = None,
    project: Optional[str] = None,
    *,
    backend: Optional[AuditBackend] = None,
) -> AuditLogger:
    """
    Create an AuditLogger for the current invocation.

    Args:
        context: Execution context (model or event payload mapping); needs
                 correlation_id and workspace_id, event_id is optional
        labels: Labels added to every entry
        name: Log stream name (default: settings.audit_log_name, "skills_audit")
        project: Backend project (default: settings.audit_project, else ambient)
        backend: Backend to submit to (default: built by create_backend)

    Raises:
        InvalidContextError: context absent or missing a required field
    """
    try:
        ctx = ExecutionContext.coerce(context)
    except ValidationError as exc:
        raise InvalidContextError(
            context=context,
            missing=_invalid_fields(exc),
            echo=_echo_context(context),
        ) from exc

    missing = ["correlation_id", "workspace_id"] if ctx is None else ctx.missing_fields()
    if missing:
        raise InvalidContextError(context=context, missing=missing, echo=_echo_context(context))

    name = name or settings.audit_log_name
    project = project or settings.audit_project
    if backend is None:
        backend = create_backend(name, project)

    logger.debug(
        "audit_logger_created",
        log_name=name,
        project=project,
        backend=type(backend).__name__,
        correlation_id=ctx.correlation_id,
    )
    return AuditLogger(ctx, backend, name, labels=labels, resource_type=settings.audit_resource_type)

"""
create_logger validation and AuditLogger.log dispatch.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from skill_audit import InvalidContextError, Severity, create_logger
from skill_audit.backends import AuditBackend, InMemoryAuditBackend
from skill_audit.models import ExecutionContext


class TestCreateLoggerValidation:
    @pytest.mark.parametrize(
        "context, missing",
        [
            (None, ("correlation_id", "workspace_id")),
            ({"eventId": "e1", "workspaceId": "w1"}, ("correlation_id",)),
            ({"eventId": "e1", "correlationId": "c1"}, ("workspace_id",)),
            ({"eventId": "e1"}, ("correlation_id", "workspace_id")),
            ({"correlationId": "", "workspaceId": "w1"}, ("correlation_id",)),
            (ExecutionContext(correlation_id="c1"), ("workspace_id",)),
        ],
    )
    def test_rejects_incomplete_context_before_backend(self, context, missing):
        with patch("skill_audit.logger.create_backend") as mock_create_backend:
            with pytest.raises(InvalidContextError) as exc_info:
                create_logger(context)
            mock_create_backend.assert_not_called()

        assert exc_info.value.missing == missing
        assert exc_info.value.context is context
        assert exc_info.value.code == "INVALID_CONTEXT"

    def test_error_echoes_context(self):
        with pytest.raises(InvalidContextError) as exc_info:
            create_logger({"eventId": "e1", "workspaceId": "w1"}, backend=InMemoryAuditBackend())
        message = str(exc_info.value)
        assert "correlation_id" in message
        assert '"eventId":"e1"' in message
        assert '"workspaceId":"w1"' in message

    def test_error_echoes_null_context(self):
        with pytest.raises(InvalidContextError, match="null"):
            create_logger(None, backend=InMemoryAuditBackend())

    def test_wrongly_typed_context_is_invalid(self):
        with pytest.raises(InvalidContextError):
            create_logger({"correlationId": ["c1"], "workspaceId": "w1"}, backend=InMemoryAuditBackend())

    def test_non_mapping_context_reports_required_fields(self):
        with pytest.raises(InvalidContextError) as exc_info:
            create_logger("not-a-context", backend=InMemoryAuditBackend())

        assert exc_info.value.missing == ("correlation_id", "workspace_id")
        assert str(exc_info.value) == (
            'Provided context is missing correlation_id and workspace_id: "not-a-context"'
        )

    def test_wrongly_typed_field_reported_by_field_name(self):
        with pytest.raises(InvalidContextError) as exc_info:
            create_logger({"correlationId": 42, "workspaceId": "w1"}, backend=InMemoryAuditBackend())

        assert exc_info.value.missing == ("correlation_id",)
        assert "correlationId" not in str(exc_info.value).split(":")[0]

    def test_event_id_is_optional(self, backend):
        audit = create_logger({"correlationId": "c1", "workspaceId": "w1"}, backend=backend)
        assert audit.context.event_id is None


class TestCreateLoggerConstruction:
    def test_defaults_to_skills_audit_stream(self, context):
        with patch("skill_audit.logger.create_backend") as mock_create_backend:
            audit = create_logger(context)
        mock_create_backend.assert_called_once_with("skills_audit", None)
        assert audit.name == "skills_audit"

    def test_name_and_project_passed_to_backend(self, context):
        with patch("skill_audit.logger.create_backend") as mock_create_backend:
            create_logger(context, name="deploy_audit", project="my-project")
        mock_create_backend.assert_called_once_with("deploy_audit", "my-project")

    def test_injected_backend_skips_factory(self, context, backend):
        with patch("skill_audit.logger.create_backend") as mock_create_backend:
            create_logger(context, backend=backend)
        mock_create_backend.assert_not_called()

    def test_factory_labels_are_copied(self, context, backend):
        labels = {"team": "x"}
        audit = create_logger(context, labels, backend=backend)
        labels["team"] = "changed"
        assert audit.labels == {"team": "x"}


class TestLog:
    @pytest.mark.asyncio
    async def test_single_message_goes_to_info(self, context, backend):
        audit = create_logger(context, {"team": "x"}, backend=backend)

        await audit.log("hello")

        assert len(backend.submissions) == 1
        submission = backend.submissions[0]
        assert submission.severity is Severity.INFO
        assert [e.message for e in submission.entries] == ["hello"]
        assert submission.entries[0].metadata.labels == {
            "team": "x",
            "execution_id": "e1",
            "correlation_id": "c1",
            "workspace_id": "w1",
        }
        assert submission.resource == {"type": "global"}
        assert submission.entries[0].metadata.resource == {"type": "global"}

    @pytest.mark.asyncio
    async def test_message_list_goes_to_warning_in_order(self, context, backend):
        audit = create_logger(context, backend=backend)

        await audit.log(["a", "b", "c"], Severity.WARNING)

        assert len(backend.submissions) == 1
        submission = backend.submissions[0]
        assert submission.severity is Severity.WARNING
        assert [e.message for e in submission.entries] == ["a", "b", "c"]
        first = submission.entries[0].metadata
        assert all(e.metadata is first for e in submission.entries)

    @pytest.mark.asyncio
    async def test_call_labels_override_and_route_to_error(self, context, backend):
        audit = create_logger(context, {"team": "x"}, backend=backend)

        await audit.log("x", Severity.ERROR, {"team": "y"})

        submission = backend.submissions[0]
        assert submission.severity is Severity.ERROR
        assert submission.entries[0].metadata.labels["team"] == "y"

    @pytest.mark.asyncio
    async def test_context_labels_win_over_caller_labels(self, context, backend):
        audit = create_logger(context, {"correlation_id": "bad"}, backend=backend)

        await audit.log("x", labels={"execution_id": "bad", "workspace_id": "bad"})

        labels = backend.submissions[0].entries[0].metadata.labels
        assert (labels["execution_id"], labels["correlation_id"], labels["workspace_id"]) == ("e1", "c1", "w1")

    @pytest.mark.asyncio
    async def test_call_labels_do_not_leak_into_next_call(self, context, backend):
        audit = create_logger(context, backend=backend)

        await audit.log("first", labels={"step": "1"})
        await audit.log("second")

        assert "step" not in backend.submissions[1].entries[0].metadata.labels

    @pytest.mark.asyncio
    async def test_unknown_severity_routes_to_info(self, context, backend):
        audit = create_logger(context, backend=backend)

        await audit.log("x", "critical")

        assert backend.submissions[0].severity is Severity.INFO

    @pytest.mark.asyncio
    @pytest.mark.parametrize("severity", [2, 1, True, None])
    async def test_non_member_severity_routes_to_info(self, context, backend, severity):
        audit = create_logger(context, backend=backend)

        await audit.log("x", severity)

        assert backend.submissions[0].severity is Severity.INFO

    @pytest.mark.asyncio
    async def test_tuple_of_messages(self, context, backend):
        audit = create_logger(context, backend=backend)

        await audit.log(("a", "b"))

        assert [e.message for e in backend.submissions[0].entries] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_empty_list_submits_nothing(self, context, backend):
        audit = create_logger(context, backend=backend)

        await audit.log([])

        assert backend.submissions == []

    @pytest.mark.asyncio
    async def test_backend_error_propagates_unchanged(self, context):
        error = ConnectionError("quota exceeded")
        backend = InMemoryAuditBackend(fail_with=error)
        audit = create_logger(context, backend=backend)

        with pytest.raises(ConnectionError) as exc_info:
            await audit.log("x")

        assert exc_info.value is error
        assert backend.submissions == []

    @pytest.mark.asyncio
    async def test_no_retry_after_failure(self, context):
        error = RuntimeError("rejected")
        backend = AsyncMock(spec=AuditBackend)
        backend.submit.side_effect = error
        audit = create_logger(context, backend=backend)

        with pytest.raises(RuntimeError) as exc_info:
            await audit.log(["a", "b"], Severity.WARNING)

        assert exc_info.value is error
        backend.submit.assert_awaited_once()
        severity, entries, resource = backend.submit.await_args.args
        assert severity is Severity.WARNING
        assert [e.message for e in entries] == ["a", "b"]
        assert resource == {"type": "global"}

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_independent(self, context, backend):
        audit = create_logger(context, backend=backend)

        await asyncio.gather(
            audit.log("w", Severity.WARNING, {"n": "1"}),
            audit.log("e", Severity.ERROR, {"n": "2"}),
        )

        by_severity = {s.severity: s for s in backend.submissions}
        assert by_severity[Severity.WARNING].entries[0].metadata.labels["n"] == "1"
        assert by_severity[Severity.ERROR].entries[0].metadata.labels["n"] == "2"

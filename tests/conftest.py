import pytest

from skill_audit.backends import InMemoryAuditBackend
from skill_audit.models import ExecutionContext


@pytest.fixture
def context() -> ExecutionContext:
    return ExecutionContext(event_id="e1", correlation_id="c1", workspace_id="w1")


@pytest.fixture
def backend() -> InMemoryAuditBackend:
    return InMemoryAuditBackend()

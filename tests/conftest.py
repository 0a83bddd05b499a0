import pytest
from fastapi.testclient import TestClient

from clinic_api.config import Settings
from clinic_api.main import create_app
from clinic_api.infrastructure.persistence.memory.clinic_repository_memory import InMemoryClinicRepository


class RecordingAuditLogger:
    def __init__(self):
        self.entries = []

    def log(self, action, entity_id, phone=None, success=True, details=None):
        self.entries.append((action, entity_id))

    @property
    def actions(self):
        return [action for action, _ in self.entries]


@pytest.fixture
def repo():
    return InMemoryClinicRepository()


@pytest.fixture
def audit():
    return RecordingAuditLogger()


@pytest.fixture
def client(repo, audit):
    app = create_app(settings=Settings(), repository=repo, audit_logger=audit)
    with TestClient(app) as c:
        yield c

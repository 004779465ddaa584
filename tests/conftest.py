import pytest
from fastapi.testclient import TestClient

from drillsargeant.core.containers import watch_service
from drillsargeant.main import app


@pytest.fixture(autouse=True)
def _clear_watches():
    """Start every test with no monitored directories."""
    watch_service.clear()
    yield
    watch_service.clear()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def sample_result(client) -> dict:
    return client.post("/api/analyze", json={"path": "/tmp/project"}).json()

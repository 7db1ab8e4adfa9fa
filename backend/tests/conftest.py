import pytest
from fastapi.testclient import TestClient

from student_directory.config import Settings
from student_directory.main import create_app


@pytest.fixture
def app():
    """Fresh app per test so each starts from the three sample students."""
    return create_app(Settings())


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def empty_client(monkeypatch):
    """Client over an app with no preloaded students."""
    monkeypatch.setenv("SEED_SAMPLE_DATA", "false")
    return TestClient(create_app(Settings()))

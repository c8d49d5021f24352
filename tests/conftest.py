import pytest
from fastapi.testclient import TestClient

from jobboard.database import Database
from jobboard.main import create_app
from jobboard.repos.job_repo import SqlJobStore


def job_payload(**overrides) -> dict:
    payload = {
        "title": "Engineer",
        "company": "Acme",
        "location": "Remote",
        "description": "Build things",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.init()
    yield db
    db.dispose()


@pytest.fixture
def store(database: Database):
    with database.session() as session:
        yield SqlJobStore(session)


@pytest.fixture
def app(database: Database):
    return create_app(database)


@pytest.fixture
def client(app):
    return TestClient(app)

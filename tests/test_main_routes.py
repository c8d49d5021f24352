import logging

from fastapi.testclient import TestClient

import jobboard.main as main_mod
from jobboard.database import Database
from jobboard.dependencies import get_job_store


def test_health_live(client):
    resp = client.get("/health/live")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_health_ready_ok(client):
    resp = client.get("/health/ready")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ready"


def test_health_ready_not_ready(monkeypatch, database, client):
    def _down():
        raise RuntimeError("db down")

    monkeypatch.setattr(database, "ping", _down)
    resp = client.get("/health/ready")
    assert resp.status_code == 503
    assert resp.json()["status"] == "not_ready"


def test_root_route(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "/api/jobs" in resp.json()["message"]


def test_unhandled_errors_return_generic_500(app):
    class _Exploding:
        def list_all(self):
            raise RuntimeError("full stack trace")

    app.dependency_overrides[get_job_store] = lambda: _Exploding()
    try:
        resp = TestClient(app, raise_server_exceptions=False).get("/api/jobs")
    finally:
        app.dependency_overrides.clear()
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "Internal server error"}


def test_lifespan_initializes_and_disposes_database(monkeypatch):
    database = Database("sqlite://")
    calls = []
    monkeypatch.setattr(database, "init", lambda: calls.append("init"))
    monkeypatch.setattr(database, "dispose", lambda: calls.append("dispose"))
    with TestClient(main_mod.create_app(database)) as c:
        assert c.get("/health/live").status_code == 200
        assert calls == ["init"]
    assert calls == ["init", "dispose"]


def test_check_environment_warns_on_sqlite_in_production(monkeypatch, caplog):
    monkeypatch.setattr(main_mod.settings, "app_env", "production")
    with caplog.at_level(logging.WARNING, logger="jobboard.main"):
        main_mod.check_environment(Database("sqlite://"))
    assert "SQLite" in caplog.text


def test_check_environment_quiet_in_development(monkeypatch, caplog):
    monkeypatch.setattr(main_mod.settings, "app_env", "development")
    with caplog.at_level(logging.WARNING, logger="jobboard.main"):
        main_mod.check_environment(Database("sqlite://"))
    assert caplog.text == ""

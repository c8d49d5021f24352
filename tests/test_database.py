from datetime import datetime, timezone

import pytest
from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool

import jobboard.database as dbmod
from jobboard.database import Database
from jobboard.models.job import Job


def test_init_creates_jobs_table_and_is_idempotent():
    db = Database("sqlite://")
    db.init()
    db.init()
    tables = inspect(db.engine).get_table_names()
    assert "jobs" in tables
    indexes = {ix["name"] for ix in inspect(db.engine).get_indexes("jobs")}
    assert "ix_jobs_search_text" in indexes
    db.dispose()


def test_sqlite_uses_a_shared_connection():
    engine = dbmod.build_engine("sqlite://")
    assert isinstance(engine.pool, StaticPool)


def test_init_failure_is_raised(monkeypatch):
    class _MetaFail:
        tables = {}

        def create_all(self, bind):
            raise RuntimeError("db fail")

    monkeypatch.setattr(dbmod.Base, "metadata", _MetaFail())
    with pytest.raises(RuntimeError):
        Database("sqlite://").init()


def test_session_is_closed_after_use(monkeypatch):
    class _Session:
        def __init__(self):
            self.closed = False

        def close(self):
            self.closed = True

    inst = _Session()
    db = Database("sqlite://")
    monkeypatch.setattr(db, "session_factory", lambda: inst)
    with db.session() as got:
        assert got is inst
    assert inst.closed is True


def test_ping():
    db = Database("sqlite://")
    db.ping()
    db.dispose()


def test_file_sqlite_gets_a_connection_per_session(tmp_path):
    engine = dbmod.build_engine(f"sqlite:///{tmp_path}/jobs.db")
    assert not isinstance(engine.pool, StaticPool)
    assert dbmod.is_sqlite_memory("sqlite:///:memory:")
    assert not dbmod.is_sqlite_memory("postgresql://u:p@localhost/jobs")


def test_closing_one_session_keeps_another_sessions_write(tmp_path):
    db = Database(f"sqlite:///{tmp_path}/jobs.db")
    db.init()
    now = datetime.now(timezone.utc)
    with db.session() as writer, db.session() as reader:
        writer.add(
            Job(
                id="6f1c1a52-2b55-4f4e-9a55-7a0c3c7f0f11",
                title="Engineer",
                company="Acme",
                location="Remote",
                description="Build things",
                created_at=now,
                updated_at=now,
            )
        )
        writer.flush()
        reader.query(Job).all()
        reader.rollback()
        reader.close()
        writer.commit()

    with db.session() as check:
        assert check.query(Job).count() == 1
    db.dispose()

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def is_sqlite_memory(database_url: str) -> bool:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return False
    return url.database in (None, "", ":memory:") or url.query.get("mode") == "memory"


def build_engine(database_url: str) -> Engine:
    if is_sqlite_memory(database_url):
        # An in-memory database lives only as long as its connection, so every session shares one.
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if database_url.startswith("sqlite"):
        # File databases get a connection per session; requests run on worker threads.
        return create_engine(database_url, connect_args={"check_same_thread": False})
    return create_engine(database_url, pool_pre_ping=True)


class Database:
    """Store connection handle: built explicitly, initialized once, disposed on shutdown."""

    def __init__(self, database_url: str):
        self.url = database_url
        self.engine = build_engine(database_url)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def init(self) -> None:
        """Create any missing tables without touching existing data."""
        from jobboard.models import Job  # noqa: F401

        try:
            existing = set(inspect(self.engine).get_table_names())
            Base.metadata.create_all(bind=self.engine)
            created = sorted(set(Base.metadata.tables.keys()) - existing)
            if created:
                logger.info("Created missing DB tables: %s", ", ".join(created))
            else:
                logger.info("Database initialized; all tables already exist")
        except Exception as e:
            logger.exception("Database initialization failed: %s", e)
            raise

    def ping(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connections closed")

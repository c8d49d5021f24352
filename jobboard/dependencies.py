from collections.abc import Iterator

from fastapi import Depends, Request

from jobboard.database import Database
from jobboard.repos.job_repo import JobStore, SqlJobStore


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_job_store(database: Database = Depends(get_database)) -> Iterator[JobStore]:
    """One session-bound store per request."""
    with database.session() as db:
        yield SqlJobStore(db)

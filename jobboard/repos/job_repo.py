import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.core.errors import JobNotFound, StoreUnavailable
from jobboard.core.validation import parse_job_input
from jobboard.models.job import Job
from jobboard.schemas.job import JobInput, JobRecord

logger = logging.getLogger(__name__)


def generate_id() -> str:
    return str(uuid4())


def normalize_id(job_id: Any) -> str | None:
    """Canonical form of a job id, or None when it cannot be one of ours."""
    try:
        return str(UUID(str(job_id)))
    except (ValueError, TypeError):
        return None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def to_record(row: Job) -> JobRecord:
    return JobRecord(
        id=row.id,
        title=row.title,
        company=row.company,
        location=row.location,
        description=row.description,
        salary=row.salary,
        type=row.type,
        remote=row.remote,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class JobStore(ABC):
    """Persistence contract for job postings."""

    @abstractmethod
    def list_all(self) -> list[JobRecord]:
        """All jobs, newest first."""

    @abstractmethod
    def get_by_id(self, job_id: str) -> JobRecord:
        """Raises JobNotFound for unknown or malformed ids."""

    @abstractmethod
    def insert(self, fields: JobInput | Mapping[str, Any]) -> JobRecord:
        ...

    @abstractmethod
    def update(self, job_id: str, fields: JobInput | Mapping[str, Any]) -> JobRecord:
        ...

    @abstractmethod
    def delete(self, job_id: str) -> None:
        ...


class SqlJobStore(JobStore):
    def __init__(self, db: Session):
        self.db = db

    def _fail(self, public_message: str, exc: Exception) -> StoreUnavailable:
        logger.exception("Job store failure (%s): %s", public_message, exc)
        self.db.rollback()
        return StoreUnavailable(public_message)

    def _load(self, job_id: str) -> Job:
        key = normalize_id(job_id)
        if key is None:
            logger.debug("Rejecting malformed job id %r as not found", job_id)
            raise JobNotFound(str(job_id))
        row = self.db.get(Job, key)
        if row is None:
            raise JobNotFound(key)
        return row

    def list_all(self) -> list[JobRecord]:
        try:
            rows = self.db.query(Job).order_by(Job.created_at.desc()).all()
        except SQLAlchemyError as e:
            raise self._fail("Error fetching jobs", e) from e
        return [to_record(r) for r in rows]

    def get_by_id(self, job_id: str) -> JobRecord:
        try:
            return to_record(self._load(job_id))
        except SQLAlchemyError as e:
            raise self._fail("Error fetching job", e) from e

    def insert(self, fields: JobInput | Mapping[str, Any]) -> JobRecord:
        data = parse_job_input(fields)
        now = _utcnow()
        row = Job(
            id=generate_id(),
            title=data.title,
            company=data.company,
            location=data.location,
            description=data.description,
            salary=data.salary,
            type=data.type.value,
            remote=data.remote,
            created_at=now,
            updated_at=now,
        )
        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            raise self._fail("Error creating job", e) from e
        logger.info("Job created: id=%s title=%r company=%r", row.id, row.title, row.company)
        return to_record(row)

    def update(self, job_id: str, fields: JobInput | Mapping[str, Any]) -> JobRecord:
        data = parse_job_input(fields)
        try:
            row = self._load(job_id)
            now = _utcnow()
            previous = _as_utc(row.updated_at)
            # updatedAt must move forward even if the clock has not ticked.
            if now <= previous:
                now = previous + timedelta(microseconds=1)
            row.title = data.title
            row.company = data.company
            row.location = data.location
            row.description = data.description
            row.salary = data.salary
            row.type = data.type.value
            row.remote = data.remote
            row.updated_at = now
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            raise self._fail("Error updating job", e) from e
        logger.info("Job updated: id=%s", row.id)
        return to_record(row)

    def delete(self, job_id: str) -> None:
        try:
            row = self._load(job_id)
            key = row.id
            self.db.delete(row)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("Error deleting job", e) from e
        logger.info("Job deleted: id=%s", key)

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Index, String, Text

from jobboard.database import Base
from jobboard.schemas.job import JobType

_TYPE_VALUES = ", ".join(f"'{t.value}'" for t in JobType)


class Job(Base):
    __tablename__ = "jobs"

    id = Column(String(36), primary_key=True, index=True)
    title = Column(String(100), nullable=False)
    company = Column(String(100), nullable=False)
    location = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    salary = Column(String(50))
    type = Column(String(20), nullable=False, default=JobType.FULL_TIME.value)
    remote = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        CheckConstraint(f"type IN ({_TYPE_VALUES})", name="ck_jobs_type"),
        # Reserved for keyword search over the listing headline fields.
        Index("ix_jobs_search_text", "title", "company", "location"),
    )

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError


class JobType(str, Enum):
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    INTERNSHIP = "Internship"


@dataclass(frozen=True)
class TextRule:
    label: str
    required: str
    too_long: str
    max_length: int


REQUIRED_TEXT_FIELDS: dict[str, TextRule] = {
    "title": TextRule("Job title", "Job title is required", "Job title cannot exceed 100 characters", 100),
    "company": TextRule("Company name", "Company name is required", "Company name cannot exceed 100 characters", 100),
    "location": TextRule("Location", "Location is required", "Location cannot exceed 100 characters", 100),
    "description": TextRule(
        "Description", "Job description is required", "Description cannot exceed 2000 characters", 2000
    ),
}
SALARY_MAX_LENGTH = 50


class FieldError(BaseModel):
    field: str
    message: str


class JobInput(BaseModel):
    """User-supplied job fields, used for both create and full-replace update."""

    model_config = ConfigDict(extra="ignore")

    title: str
    company: str
    location: str
    description: str
    salary: str | None = None
    type: JobType = JobType.FULL_TIME
    remote: bool = False

    @field_validator("title", "company", "location", "description", mode="before")
    @classmethod
    def _required_text(cls, value: Any, info: ValidationInfo) -> str:
        rule = REQUIRED_TEXT_FIELDS[info.field_name]
        if value is None:
            raise PydanticCustomError("required_text", rule.required)
        if not isinstance(value, str):
            raise PydanticCustomError("text_type", "{label} must be text", {"label": rule.label})
        value = value.strip()
        if not value:
            raise PydanticCustomError("required_text", rule.required)
        if len(value) > rule.max_length:
            raise PydanticCustomError("text_too_long", rule.too_long)
        return value

    @field_validator("salary", mode="before")
    @classmethod
    def _salary(cls, value: Any) -> str | None:
        if value is None:
            return None
        if not isinstance(value, str):
            raise PydanticCustomError("text_type", "Salary must be text")
        value = value.strip()
        if len(value) > SALARY_MAX_LENGTH:
            raise PydanticCustomError("text_too_long", "Salary cannot exceed 50 characters")
        return value or None

    @field_validator("type", mode="before")
    @classmethod
    def _job_type(cls, value: Any) -> JobType:
        if value is None:
            return JobType.FULL_TIME
        if isinstance(value, JobType):
            return value
        if isinstance(value, str) and value in {t.value for t in JobType}:
            return JobType(value)
        raise PydanticCustomError("job_type", "Invalid job type")

    @field_validator("remote", mode="before")
    @classmethod
    def _remote(cls, value: Any) -> bool:
        if value is None:
            return False
        # Strict: "yes", "true" and 1 are all rejected.
        if not isinstance(value, bool):
            raise PydanticCustomError("remote_type", "Remote must be a boolean")
        return value


class JobRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    company: str
    location: str
    description: str
    salary: str | None = None
    type: JobType = JobType.FULL_TIME
    remote: bool = False
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive datetimes; everything is stored in UTC.
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

    def to_input(self) -> JobInput:
        """Editable fields of this record, e.g. to prefill an edit form."""
        return JobInput(
            title=self.title,
            company=self.company,
            location=self.location,
            description=self.description,
            salary=self.salary,
            type=self.type,
            remote=self.remote,
        )

import pytest

from conftest import job_payload
from jobboard.core.errors import JobValidationError
from jobboard.core.validation import parse_job_input, validate_job_fields
from jobboard.schemas.job import JobType


def _messages(payload) -> dict[str, str]:
    return {e.field: e.message for e in validate_job_fields(payload)}


def test_parse_job_input_applies_defaults_and_trims():
    data = parse_job_input(job_payload(title="  Engineer  ", salary="  $100k "))
    assert data.title == "Engineer"
    assert data.salary == "$100k"
    assert data.type is JobType.FULL_TIME
    assert data.remote is False


def test_blank_salary_is_stored_as_none():
    assert parse_job_input(job_payload(salary="   ")).salary is None


def test_null_type_and_remote_fall_back_to_defaults():
    data = parse_job_input(job_payload(type=None, remote=None))
    assert data.type is JobType.FULL_TIME
    assert data.remote is False


def test_accepts_every_job_type():
    for job_type in ("Full-time", "Part-time", "Contract", "Internship"):
        assert parse_job_input(job_payload(type=job_type)).type.value == job_type


def test_empty_and_whitespace_title_rejected():
    assert _messages(job_payload(title="")) == {"title": "Job title is required"}
    assert _messages(job_payload(title="   ")) == {"title": "Job title is required"}


def test_length_limits():
    assert validate_job_fields(job_payload(title="A" * 100)) == []
    assert _messages(job_payload(title="A" * 101)) == {"title": "Job title cannot exceed 100 characters"}
    assert _messages(job_payload(description="d" * 2001)) == {
        "description": "Description cannot exceed 2000 characters"
    }
    assert _messages(job_payload(salary="9" * 51)) == {"salary": "Salary cannot exceed 50 characters"}


def test_length_is_measured_after_trim():
    assert validate_job_fields(job_payload(company="  " + "C" * 100 + "  ")) == []


def test_invalid_type_and_non_boolean_remote():
    assert _messages(job_payload(type="Freelance")) == {"type": "Invalid job type"}
    assert _messages(job_payload(remote="yes")) == {"remote": "Remote must be a boolean"}
    assert _messages(job_payload(remote=1)) == {"remote": "Remote must be a boolean"}


def test_every_invalid_field_is_reported():
    msgs = _messages({"title": "", "company": "x" * 101, "type": "Freelance", "remote": "yes"})
    assert msgs == {
        "title": "Job title is required",
        "company": "Company name cannot exceed 100 characters",
        "location": "Location is required",
        "description": "Job description is required",
        "type": "Invalid job type",
        "remote": "Remote must be a boolean",
    }


def test_non_text_value_for_text_field():
    assert _messages(job_payload(location=42)) == {"location": "Location must be text"}


def test_non_object_body():
    with pytest.raises(JobValidationError) as exc:
        parse_job_input(["not", "an", "object"])
    assert [e.model_dump() for e in exc.value.errors] == [
        {"field": "body", "message": "Request body must be a JSON object"}
    ]


def test_unknown_fields_are_ignored():
    data = parse_job_input(job_payload(id="client-chosen", createdAt="yesterday"))
    assert not hasattr(data, "id")

"""
Job field validation shared by the API and the client.

Both sides call `parse_job_input`, so a form rejected by the client is exactly a
payload the server would reject. The server still re-checks everything it receives.
"""
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from jobboard.core.errors import JobValidationError
from jobboard.schemas.job import REQUIRED_TEXT_FIELDS, FieldError, JobInput

BODY_NOT_OBJECT = "Request body must be a JSON object"


def _to_field_errors(exc: ValidationError) -> list[FieldError]:
    errors: list[FieldError] = []
    for err in exc.errors():
        loc = err.get("loc") or ()
        field = str(loc[0]) if loc else "body"
        if err["type"] == "missing" and field in REQUIRED_TEXT_FIELDS:
            message = REQUIRED_TEXT_FIELDS[field].required
        elif err["type"] == "model_type":
            message = BODY_NOT_OBJECT
        else:
            message = err["msg"]
        errors.append(FieldError(field=field, message=message))
    return errors


def parse_job_input(payload: Any) -> JobInput:
    """Validate raw job fields; every invalid field is reported, not just the first."""
    if isinstance(payload, JobInput):
        return payload
    if not isinstance(payload, Mapping):
        raise JobValidationError([FieldError(field="body", message=BODY_NOT_OBJECT)])
    try:
        return JobInput.model_validate(dict(payload))
    except ValidationError as exc:
        raise JobValidationError(_to_field_errors(exc)) from exc


def validate_job_fields(payload: Any) -> list[FieldError]:
    try:
        parse_job_input(payload)
    except JobValidationError as exc:
        return exc.errors
    return []

from fastapi import status

from jobboard.schemas.job import FieldError


class JobBoardError(Exception):
    """Base class for outcomes the API turns into an error envelope."""

    message = "Internal server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class JobValidationError(JobBoardError):
    message = "Validation error"

    def __init__(self, errors: list[FieldError]):
        super().__init__()
        self.errors = errors


class JobNotFound(JobBoardError):
    message = "Job not found"

    def __init__(self, job_id: str | None = None):
        super().__init__()
        self.job_id = job_id


class StoreUnavailable(JobBoardError):
    """The store failed. `message` is safe for clients; the cause stays server-side."""

    message = "Error accessing jobs"


_STATUS_BY_ERROR: list[tuple[type[JobBoardError], int]] = [
    (JobValidationError, status.HTTP_400_BAD_REQUEST),
    (JobNotFound, status.HTTP_404_NOT_FOUND),
    (StoreUnavailable, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exc: JobBoardError) -> int:
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(exc: JobBoardError) -> dict:
    body: dict = {"success": False, "message": exc.message}
    if isinstance(exc, JobValidationError):
        body["errors"] = [e.model_dump() for e in exc.errors]
    return body

from jobboard.client.api import ApiError, JobsAPI
from jobboard.client.board import JobBoard, Toast, ViewState

__all__ = [
    "ApiError",
    "JobsAPI",
    "JobBoard",
    "Toast",
    "ViewState",
]

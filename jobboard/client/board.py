import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from jobboard.client.api import ApiError, JobsAPI
from jobboard.core.errors import JobValidationError
from jobboard.core.validation import parse_job_input
from jobboard.schemas.job import JobRecord

logger = logging.getLogger(__name__)


class ViewState(str, Enum):
    LOADING = "loading"
    LISTING = "listing"
    EDITING = "editing"
    SUBMITTING = "submitting"


@dataclass
class Toast:
    message: str
    kind: str = "info"  # info, success, error


class JobBoard:
    """
    Client view state for the job board.

    Holds the rendered job list and walks between LOADING, LISTING, EDITING and
    SUBMITTING. A failed request never changes the list; it only raises a toast.
    """

    def __init__(self, api: JobsAPI):
        self.api = api
        self.state = ViewState.LOADING
        self.jobs: list[JobRecord] = []
        self.editing: JobRecord | None = None
        self.form_errors: dict[str, str] = {}
        self.toast: Toast | None = None

    @property
    def is_loading(self) -> bool:
        return self.state is ViewState.LOADING

    @property
    def is_submitting(self) -> bool:
        return self.state is ViewState.SUBMITTING

    def show_toast(self, message: str, kind: str = "info") -> None:
        self.toast = Toast(message, kind)

    def dismiss_toast(self) -> None:
        self.toast = None

    def mount(self) -> None:
        self.state = ViewState.LOADING
        try:
            self.jobs = self.api.get_all()
        except ApiError as e:
            logger.error("Error fetching jobs: %s", e.message)
            self.jobs = []
            self.show_toast("Failed to load jobs. Please refresh the page.", "error")
        finally:
            self.state = ViewState.LISTING

    def start_add(self) -> None:
        self.editing = None
        self.form_errors = {}
        self.state = ViewState.EDITING

    def start_edit(self, job: JobRecord) -> None:
        self.editing = job
        self.form_errors = {}
        self.state = ViewState.EDITING

    def cancel(self) -> None:
        self.editing = None
        self.form_errors = {}
        self.state = ViewState.LISTING

    def submit(self, form: Mapping[str, Any]) -> bool:
        """Validate locally, then create or update. Returns True once the server accepted it."""
        if self.state is not ViewState.EDITING:
            logger.debug("Ignoring submit while %s", self.state.value)
            return False

        try:
            fields = parse_job_input(form)
        except JobValidationError as e:
            self.form_errors = {err.field: err.message for err in e.errors}
            return False
        self.form_errors = {}

        editing = self.editing
        self.state = ViewState.SUBMITTING
        try:
            if editing is not None:
                saved = self.api.update(editing.id, fields)
                self.jobs = [saved if j.id == editing.id else j for j in self.jobs]
                self.show_toast("Job updated successfully!", "success")
            else:
                saved = self.api.create(fields)
                self.jobs = [saved, *self.jobs]
                self.show_toast("Job created successfully!", "success")
        except ApiError as e:
            logger.error("Error submitting job: %s", e.message)
            self.form_errors = {err.field: err.message for err in e.errors}
            self.show_toast(e.message or "An error occurred while saving the job.", "error")
            return False
        finally:
            # Any failure leaves the form open and interactive again.
            if self.state is ViewState.SUBMITTING:
                self.state = ViewState.EDITING

        self.editing = None
        self.state = ViewState.LISTING
        return True

    def delete(self, job_id: str, confirm: Callable[[JobRecord | None], bool]) -> bool:
        job = next((j for j in self.jobs if j.id == job_id), None)
        if not confirm(job):
            return False
        try:
            self.api.delete(job_id)
        except ApiError as e:
            logger.error("Error deleting job %s: %s", job_id, e.message)
            self.show_toast("Failed to delete job. Please try again.", "error")
            return False
        self.jobs = [j for j in self.jobs if j.id != job_id]
        self.show_toast("Job deleted successfully!", "success")
        return True

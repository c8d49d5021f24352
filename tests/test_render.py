from datetime import datetime, timezone

from conftest import job_payload
from jobboard.client.render import (
    format_posted_date,
    preview_description,
    render_job_card,
    render_job_list,
)
from jobboard.schemas.job import JobRecord


def _record(**overrides) -> JobRecord:
    posted = datetime(2024, 1, 5, 14, 30, tzinfo=timezone.utc)
    return JobRecord(id="j1", created_at=posted, updated_at=posted, **job_payload(**overrides))


def test_format_posted_date():
    assert format_posted_date(_record()) == "Jan 5, 2024"


def test_preview_description_truncates_long_text():
    text = "x" * 301
    assert preview_description(text) == "x" * 300 + "..."
    assert preview_description(text, expanded=True) == text
    assert preview_description("x" * 300) == "x" * 300


def test_card_shows_badges_and_optional_salary():
    card = render_job_card(_record(remote=True, type="Contract", salary="$50/h"))
    assert "Engineer  [Contract | Remote]" in card
    assert "Acme - Remote" in card
    assert "Salary: $50/h" in card
    assert "Posted Jan 5, 2024" in card

    plain = render_job_card(_record())
    assert "Salary" not in plain
    assert "[Full-time]" in plain


def test_list_header_and_empty_states():
    assert render_job_list([], is_loading=True) == "Loading jobs..."
    assert render_job_list([]).startswith("No jobs posted yet")
    assert render_job_list([_record()]).startswith("Job Listings (1 job)")
    assert render_job_list([_record(), _record()]).startswith("Job Listings (2 jobs)")

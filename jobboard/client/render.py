from jobboard.schemas.job import JobRecord

DESCRIPTION_PREVIEW_CHARS = 300


def format_posted_date(job: JobRecord) -> str:
    d = job.created_at
    return f"{d.strftime('%b')} {d.day}, {d.year}"


def preview_description(description: str, expanded: bool = False) -> str:
    if expanded or len(description) <= DESCRIPTION_PREVIEW_CHARS:
        return description
    return f"{description[:DESCRIPTION_PREVIEW_CHARS]}..."


def render_job_card(job: JobRecord, expanded: bool = False) -> str:
    badges = [job.type.value]
    if job.remote:
        badges.append("Remote")
    lines = [
        f"{job.title}  [{' | '.join(badges)}]",
        f"{job.company} - {job.location}",
    ]
    if job.salary:
        lines.append(f"Salary: {job.salary}")
    lines.append("")
    lines.append(preview_description(job.description, expanded))
    lines.append("")
    lines.append(f"Posted {format_posted_date(job)}  (id: {job.id})")
    return "\n".join(lines)


def render_job_list(jobs: list[JobRecord], is_loading: bool = False) -> str:
    if is_loading:
        return "Loading jobs..."
    if not jobs:
        return "No jobs posted yet. Add the first job posting to get started."
    noun = "job" if len(jobs) == 1 else "jobs"
    sections = [f"Job Listings ({len(jobs)} {noun})"]
    sections.extend(render_job_card(j) for j in jobs)
    return ("\n" + "-" * 60 + "\n").join(sections)

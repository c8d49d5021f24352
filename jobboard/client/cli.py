"""
Terminal front end for the JobBoard API.

  jobboard list
  jobboard add --title Engineer --company Acme --location Remote --description "Build things"
  jobboard edit <id> --salary "$120k"
  jobboard delete <id> [--yes]

The API location comes from --base-url or API_BASE_URL.
"""
import argparse
import sys

from jobboard.client.api import ApiError, JobsAPI
from jobboard.client.board import JobBoard
from jobboard.client.render import render_job_card, render_job_list
from jobboard.logging_config import setup_logging
from jobboard.schemas.job import JobRecord, JobType

FORM_FIELDS = ("title", "company", "location", "description", "salary", "type", "remote")


def _add_field_args(parser: argparse.ArgumentParser, required: bool) -> None:
    parser.add_argument("--title", required=required)
    parser.add_argument("--company", required=required)
    parser.add_argument("--location", required=required)
    parser.add_argument("--description", required=required)
    parser.add_argument("--salary")
    parser.add_argument("--type", choices=[t.value for t in JobType])
    parser.add_argument("--remote", action=argparse.BooleanOptionalAction, default=None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jobboard", description="List, add, edit and delete job postings.")
    parser.add_argument("--base-url", help="API base URL, e.g. http://localhost:8000/api")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--log-level", default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="Show all job postings, newest first")
    p_list.add_argument("--expand", action="store_true", help="Show full descriptions")

    p_show = sub.add_parser("show", help="Show one job posting")
    p_show.add_argument("job_id")

    p_add = sub.add_parser("add", help="Create a job posting")
    _add_field_args(p_add, required=True)

    p_edit = sub.add_parser("edit", help="Edit a job posting; omitted fields keep their value")
    p_edit.add_argument("job_id")
    _add_field_args(p_edit, required=False)

    p_delete = sub.add_parser("delete", help="Delete a job posting")
    p_delete.add_argument("job_id")
    p_delete.add_argument("--yes", "-y", action="store_true", help="Skip confirmation prompt")
    return parser


def _form_from_args(args: argparse.Namespace, base: dict | None = None) -> dict:
    form = dict(base or {})
    for name in FORM_FIELDS:
        value = getattr(args, name, None)
        if value is not None:
            form[name] = value
    return form


def _confirm_delete(job: JobRecord | None) -> bool:
    label = f"'{job.title}' at {job.company}" if job else "this job"
    try:
        reply = input(f"Delete {label}? This action cannot be undone. Type 'yes' to continue: ").strip().lower()
    except EOFError:
        reply = ""
    return reply == "yes"


def _report(board: JobBoard) -> None:
    if board.toast:
        stream = sys.stderr if board.toast.kind == "error" else sys.stdout
        print(board.toast.message, file=stream)
        board.dismiss_toast()
    for field, message in board.form_errors.items():
        print(f"  {field}: {message}", file=sys.stderr)


def run(args: argparse.Namespace, api: JobsAPI) -> int:
    board = JobBoard(api)

    if args.command == "show":
        try:
            job = api.get_by_id(args.job_id)
        except ApiError as e:
            print(e.message, file=sys.stderr)
            return 1
        print(render_job_card(job, expanded=True))
        return 0

    board.mount()
    if args.command == "list":
        _report(board)
        if args.expand:
            print("\n\n".join(render_job_card(j, expanded=True) for j in board.jobs) or render_job_list([]))
        else:
            print(render_job_list(board.jobs, is_loading=board.is_loading))
        return 0

    if args.command == "add":
        board.start_add()
        ok = board.submit(_form_from_args(args))
        if ok:
            print(render_job_card(board.jobs[0], expanded=True))
        else:
            print("Job was not saved.", file=sys.stderr)
        _report(board)
        return 0 if ok else 1

    if args.command == "edit":
        job = next((j for j in board.jobs if j.id == args.job_id), None)
        if job is None:
            try:
                job = api.get_by_id(args.job_id)
            except ApiError as e:
                print(e.message, file=sys.stderr)
                return 1
        board.start_edit(job)
        ok = board.submit(_form_from_args(args, base=job.to_input().model_dump(mode="json")))
        if ok:
            updated = next((j for j in board.jobs if j.id == job.id), None)
            if updated is not None:
                print(render_job_card(updated, expanded=True))
        else:
            print("Job was not saved.", file=sys.stderr)
        _report(board)
        return 0 if ok else 1

    if args.command == "delete":
        confirm = (lambda _job: True) if args.yes else _confirm_delete
        ok = board.delete(args.job_id, confirm)
        if not ok and board.toast is None:
            print("Aborted.")
        _report(board)
        return 0 if ok else 1

    return 2


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, stream=sys.stderr)
    with JobsAPI(base_url=args.base_url, timeout=args.timeout) as api:
        return run(args, api)


if __name__ == "__main__":
    sys.exit(main())

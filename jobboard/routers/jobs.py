import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from jobboard.core.validation import parse_job_input
from jobboard.dependencies import get_job_store
from jobboard.repos.job_repo import JobStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.get("")
def list_jobs(store: JobStore = Depends(get_job_store)):
    """All job postings, newest first."""
    jobs = store.list_all()
    logger.debug("GET /api/jobs count=%d", len(jobs))
    return {
        "success": True,
        "count": len(jobs),
        "data": [j.to_json() for j in jobs],
    }


@router.get("/{job_id}")
def get_job(job_id: str, store: JobStore = Depends(get_job_store)):
    job = store.get_by_id(job_id)
    return {"success": True, "data": job.to_json()}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_job(
    payload: Any = Body(None),
    store: JobStore = Depends(get_job_store),
):
    fields = parse_job_input(payload)
    job = store.insert(fields)
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={
            "success": True,
            "message": "Job created successfully",
            "data": job.to_json(),
        },
    )


@router.put("/{job_id}")
def update_job(
    job_id: str,
    payload: Any = Body(None),
    store: JobStore = Depends(get_job_store),
):
    """Replace every editable field of a job. The body is validated before the id is looked up."""
    fields = parse_job_input(payload)
    job = store.update(job_id, fields)
    return {
        "success": True,
        "message": "Job updated successfully",
        "data": job.to_json(),
    }


@router.delete("/{job_id}")
def delete_job(job_id: str, store: JobStore = Depends(get_job_store)):
    store.delete(job_id)
    return {"success": True, "message": "Job deleted successfully"}

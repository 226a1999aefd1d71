"""Job request API endpoints (company submissions and admin review)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, status

from app.job_requests.dependencies import get_job_request_repository
from app.job_requests.models import (
    JobRequestCreate,
    JobRequestCreateResponse,
    JobRequestListResponse,
    JobRequestStatusResponse,
    JobRequestStatusUpdate,
)
from app.job_requests.service import JobRequestRepository


router = APIRouter(prefix="/job_requests", tags=["Job Requests"])


@router.post("", response_model=JobRequestCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_job_request(
    body: JobRequestCreate,
    repo: JobRequestRepository = Depends(get_job_request_repository),
):
    """
    Create a job request from a company form submission.

    `company_id` and `title` are required; the rest is default-filled.
    New requests start in `pending`.
    """
    payload = {**body.model_dump(exclude_unset=True), **(body.model_extra or {})}
    job = await repo.create(payload)
    return JobRequestCreateResponse(
        id=job["id"],
        job=job,
        message="Job request created successfully",
    )


@router.get("", response_model=JobRequestListResponse)
async def list_job_requests(repo: JobRequestRepository = Depends(get_job_request_repository)):
    """All job requests, newest first."""
    jobs = await repo.list_all()
    return JobRequestListResponse(jobs=jobs, count=len(jobs))


@router.get("/company/{company_id}", response_model=JobRequestListResponse)
async def list_company_job_requests(
    company_id: str = Path(..., description="Owning company ID"),
    repo: JobRequestRepository = Depends(get_job_request_repository),
):
    jobs = await repo.list_by_company(company_id)
    return JobRequestListResponse(jobs=jobs, count=len(jobs))


@router.put("/{job_id}/status", response_model=JobRequestStatusResponse)
async def update_job_request_status(
    body: JobRequestStatusUpdate,
    job_id: str = Path(..., description="Job request ID"),
    repo: JobRequestRepository = Depends(get_job_request_repository),
):
    job = await repo.update_status(job_id, body.status)
    return JobRequestStatusResponse(
        job=job,
        message=f"Job request status updated to {job['status']}",
    )

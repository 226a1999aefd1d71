"""Admin endpoints: credential-stub login plus demo read/review routes."""

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Path

from app.admin.dependencies import require_admin_token
from app.admin.fixtures import (
    DEMO_JOBS,
    DEMO_STATS,
    DEMO_URGENT_REQUESTS,
    DEMO_USERS,
    demo_reviewed_job,
)
from app.admin.models import AdminJobActionResponse, AdminLoginRequest, AdminLoginResponse
from app.core.config import get_settings
from app.core.exceptions import UnauthorizedException
from app.job_requests.service import format_timestamp

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])

# Everything except login needs an admin session.
protected = APIRouter(dependencies=[Depends(require_admin_token)])


@router.post("/login", response_model=AdminLoginResponse)
async def admin_login(credentials: AdminLoginRequest):
    """
    Exchange the configured admin username/password for a session token.

    The token is ``<ADMIN_TOKEN_PREFIX><epoch millis>`` and is only checked
    for its prefix. Placeholder until a real identity provider exists.
    """
    settings = get_settings()
    logger.info(f"Admin login attempt: {credentials.username}")

    if credentials.username != settings.ADMIN_USERNAME or credentials.password != settings.ADMIN_PASSWORD:
        logger.warning("Invalid admin credentials")
        raise UnauthorizedException("Invalid username or password")

    token = f"{settings.ADMIN_TOKEN_PREFIX}{int(time.time() * 1000)}"
    return AdminLoginResponse(success=True, token=token, message="Admin login successful")


@protected.get("/stats")
async def admin_stats():
    return DEMO_STATS


@protected.get("/jobs")
async def admin_jobs():
    return DEMO_JOBS


@protected.get("/users")
async def admin_users():
    return DEMO_USERS


@protected.get("/urgent-requests")
async def admin_urgent_requests():
    return DEMO_URGENT_REQUESTS


@protected.put("/jobs/{job_id}/approve", response_model=AdminJobActionResponse)
async def approve_job(job_id: str = Path(..., description="Job ID")):
    logger.info(f"Approving job: {job_id}")
    stamp = format_timestamp(datetime.now(timezone.utc))
    return AdminJobActionResponse(
        success=True,
        message="Job approved",
        job=demo_reviewed_job(job_id, "active", "approvedAt", stamp),
    )


@protected.put("/jobs/{job_id}/reject", response_model=AdminJobActionResponse)
async def reject_job(job_id: str = Path(..., description="Job ID")):
    logger.info(f"Rejecting job: {job_id}")
    stamp = format_timestamp(datetime.now(timezone.utc))
    return AdminJobActionResponse(
        success=True,
        message="Job rejected",
        job=demo_reviewed_job(job_id, "rejected", "rejectedAt", stamp),
    )


router.include_router(protected)

"""Job endpoints proxied to the upstream job service."""

import logging

import httpx
from fastapi import APIRouter, Depends, Request, Response

from jobboard.api.responses import error_response, success_response
from jobboard.services.job_service import JobServiceClient, UpstreamResult, get_job_service

logger = logging.getLogger(__name__)

router = APIRouter()

CONNECT_ERROR = "Failed to connect to backend"
UPDATE_ERROR = "Failed to update job"
DELETE_ERROR = "Failed to delete job"

# Raised when the job service cannot be reached or the target URL cannot be built
UPSTREAM_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


def _relay(result: UpstreamResult) -> Response:
    """Return the upstream status and body unchanged."""
    return Response(content=result.body or b"", status_code=result.status_code, media_type="application/json")


@router.get("")
async def list_jobs(request: Request, jobs: JobServiceClient = Depends(get_job_service)):
    """List/search jobs. The query string is forwarded as-is."""
    try:
        result = await jobs.list_jobs(request.url.query)
    except UPSTREAM_ERRORS as e:
        logger.error(f"Error proxying to backend: {e!r}")
        return error_response(CONNECT_ERROR)
    return _relay(result)


@router.post("")
async def create_job(request: Request, jobs: JobServiceClient = Depends(get_job_service)):
    """Create a job."""
    try:
        body = await request.body()
        result = await jobs.create_job(body, request.headers.get("authorization"))
    except UPSTREAM_ERRORS as e:
        logger.error(f"Error proxying to backend: {e!r}")
        return error_response(CONNECT_ERROR)
    return _relay(result)


@router.get("/{job_id}")
async def get_job(job_id: str, jobs: JobServiceClient = Depends(get_job_service)):
    """Get a job by id."""
    try:
        result = await jobs.get_job(job_id)
    except UPSTREAM_ERRORS as e:
        logger.error(f"Error proxying to backend: {e!r}")
        return error_response(CONNECT_ERROR)
    return _relay(result)


@router.put("/{job_id}")
async def update_job(job_id: str, request: Request, jobs: JobServiceClient = Depends(get_job_service)):
    """Update a job."""
    try:
        body = await request.body()
        result = await jobs.update_job(job_id, body, request.headers.get("authorization"))
    except UPSTREAM_ERRORS as e:
        logger.error(f"Error proxying to backend: {e!r}")
        return error_response(UPDATE_ERROR)
    return _relay(result)


@router.delete("/{job_id}")
async def delete_job(job_id: str, request: Request, jobs: JobServiceClient = Depends(get_job_service)):
    """Delete a job. An empty 204 from upstream becomes a success acknowledgment."""
    try:
        result = await jobs.delete_job(job_id, request.headers.get("authorization"))
    except UPSTREAM_ERRORS as e:
        logger.error(f"Error proxying to backend: {e!r}")
        return error_response(DELETE_ERROR)

    if result.no_content:
        return success_response(message="Job deleted successfully")
    return _relay(result)

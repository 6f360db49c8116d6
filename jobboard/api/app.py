"""FastAPI application."""

import logging
import os
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from jobboard.api.limiter import limiter
from jobboard.api.responses import error_response
from jobboard.api.schemas import HealthResponse
from jobboard.config import settings

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

ALLOWED_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")

app = FastAPI(
    title="Job Board API",
    description="Job service gateway and CV generation",
    version="0.1.0",
)

app.state.limiter = limiter


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Return 429 with a clear message when rate limit is exceeded."""
    return error_response(f"Rate limit exceeded: {exc.detail}", status_code=429)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Keep internal error details out of responses."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response("Internal server error")


app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    status_code = 500  # unless call_next returns a response
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        process_time = time.time() - start_time
        logger.info(
            "%s %s completed_in=%.3f status_code=%d",
            request.method,
            request.url.path,
            process_time,
            status_code,
        )


# Import and include routers
from jobboard.api.routes import cv, jobs  # noqa: E402

app.include_router(jobs.router, prefix="/jobs", tags=["Jobs"])
app.include_router(cv.router, prefix="/cv", tags=["CV"])


@app.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy")

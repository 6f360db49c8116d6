"""Shared fixtures: in-process app client and a fake upstream job service."""

import httpx
import pytest
from fastapi.testclient import TestClient

from jobboard.agents.cv_generator import HeuristicContentGenerator, get_content_generator
from jobboard.api.app import app
from jobboard.api.limiter import limiter
from jobboard.services.job_service import JobServiceClient, get_job_service

UPSTREAM_URL = "http://jobs.internal"

limiter.enabled = False


class FakeJobService:
    """Records forwarded requests and answers with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = b'{"success": true, "data": []}'
        self.error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def client(self) -> JobServiceClient:
        return JobServiceClient(base_url=UPSTREAM_URL, timeout=5.0, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def upstream():
    return FakeJobService()


@pytest.fixture
def client(upstream):
    app.dependency_overrides[get_job_service] = upstream.client
    app.dependency_overrides[get_content_generator] = lambda: HeuristicContentGenerator(delay=0)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

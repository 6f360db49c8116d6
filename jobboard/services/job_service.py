"""
Upstream job service client.

Forwards job-resource requests to the internal job API and hands back
the raw outcome. Query strings, bodies and Authorization headers are
copied verbatim and never inspected.
"""

import logging
from dataclasses import dataclass

import httpx

from jobboard.config import settings

logger = logging.getLogger(__name__)

JOBS_PATH = "/api/v1/jobs"


@dataclass(frozen=True)
class ProxyRequest:
    """One outbound request to the job service."""

    method: str
    path: str
    query: str = ""
    auth_header: str | None = None
    body: bytes | None = None


@dataclass(frozen=True)
class UpstreamResult:
    """Upstream status code plus body (None when the response carries no content)."""

    status_code: int
    body: bytes | None

    @property
    def no_content(self) -> bool:
        return self.status_code == 204


class JobServiceClient:
    """Pass-through client for the upstream job service."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.job_service_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.upstream_timeout
        self._transport = transport

    async def list_jobs(self, query: str = "") -> UpstreamResult:
        return await self.send(ProxyRequest("GET", JOBS_PATH, query=query))

    async def get_job(self, job_id: str) -> UpstreamResult:
        return await self.send(ProxyRequest("GET", f"{JOBS_PATH}/{job_id}"))

    async def create_job(self, body: bytes, auth_header: str | None = None) -> UpstreamResult:
        return await self.send(ProxyRequest("POST", JOBS_PATH, auth_header=auth_header, body=body))

    async def update_job(self, job_id: str, body: bytes, auth_header: str | None = None) -> UpstreamResult:
        return await self.send(
            ProxyRequest("PUT", f"{JOBS_PATH}/{job_id}", auth_header=auth_header, body=body)
        )

    async def delete_job(self, job_id: str, auth_header: str | None = None) -> UpstreamResult:
        return await self.send(ProxyRequest("DELETE", f"{JOBS_PATH}/{job_id}", auth_header=auth_header))

    async def send(self, proxy_request: ProxyRequest) -> UpstreamResult:
        """
        Perform a single round trip to the job service.

        Args:
            proxy_request: Request to forward

        Returns:
            UpstreamResult with the upstream status and raw body

        Raises:
            httpx.HTTPError: If the job service could not be reached
        """
        url = f"{self.base_url}{proxy_request.path}"
        if proxy_request.query:
            url = f"{url}?{proxy_request.query}"

        headers = {"Content-Type": "application/json"}
        if proxy_request.auth_header:
            headers["Authorization"] = proxy_request.auth_header

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.request(
                proxy_request.method,
                url,
                headers=headers,
                content=proxy_request.body,
            )

        logger.debug(f"{proxy_request.method} {url} -> {response.status_code}")

        if response.status_code == 204:
            return UpstreamResult(status_code=204, body=None)
        return UpstreamResult(status_code=response.status_code, body=response.content)


def get_job_service() -> JobServiceClient:
    """FastAPI dependency for the job service client."""
    return JobServiceClient()

"""
Services for the Job Board backend.

- job_service: Pass-through client for the upstream job API
"""

from jobboard.services.job_service import JobServiceClient, ProxyRequest, UpstreamResult, get_job_service

__all__ = ["JobServiceClient", "ProxyRequest", "UpstreamResult", "get_job_service"]

"""
Job Board Backend.

Core components:
- services: Upstream job-service client (proxy gateway)
- agents: CV content generation and assembly pipeline
- tools: CV document text extraction
- api: FastAPI application and routes
"""

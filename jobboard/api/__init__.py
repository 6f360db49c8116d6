"""HTTP API: FastAPI application, schemas and routes."""

"""
Job Board Backend - Server Entry Point.

Serves the job gateway and CV generation API with uvicorn.
"""

from dotenv import load_dotenv

load_dotenv()

import uvicorn  # noqa: E402

from jobboard.config import settings  # noqa: E402


def main():
    """Run the API server."""
    print("Job Board API")
    print("=" * 40)
    print(f"Job service: {settings.job_service_url}")
    print(f"Listening on http://{settings.host}:{settings.port}")
    print("-" * 40)

    uvicorn.run(
        "jobboard.api.app:app",
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()

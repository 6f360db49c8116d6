"""Uniform success/error JSON envelopes."""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def error_response(message: str, status_code: int = 500) -> JSONResponse:
    """Build a `{success: false, error}` response."""
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def success_response(data: Any = None, message: str | None = None, status_code: int = 200) -> JSONResponse:
    """Build a `{success: true, message?, data?}` response."""
    content: dict[str, Any] = {"success": True}
    if message is not None:
        content["message"] = message
    if data is not None:
        content["data"] = jsonable_encoder(data, by_alias=True)
    return JSONResponse(status_code=status_code, content=content)

"""CV endpoints: generation, document parsing and draft create/update."""

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Depends, File, Query, Request, UploadFile

from jobboard.agents.cv_generator import ContentGenerator, get_content_generator
from jobboard.agents.pipeline import (
    CVValidationError,
    draft_from_document,
    generate_cv,
    generate_record_id,
    sample_record,
)
from jobboard.api.limiter import limiter
from jobboard.api.responses import error_response, success_response
from jobboard.api.schemas import CVGenerateResponse, CVGenerationInput, ErrorResponse
from jobboard.config import settings
from jobboard.tools.document_parser import ALLOWED_CONTENT_TYPES, DocumentParseError, extract_text

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.post("/generate", response_model=CVGenerateResponse, responses=ERROR_RESPONSES)
@limiter.limit(settings.cv_generate_rate_limit)
async def generate(request: Request, generator: ContentGenerator = Depends(get_content_generator)):
    """Generate a structured CV from applicant free text."""
    try:
        payload = await request.json()
    except ValueError:
        logger.exception("CV generation error: unreadable body")
        return error_response("Failed to generate CV")

    if not isinstance(payload, dict):
        payload = {}

    try:
        data = CVGenerationInput.model_validate(payload)
        record = await generate_cv(data, generator)
    except CVValidationError as e:
        return error_response(str(e), status_code=400)
    except Exception:
        logger.exception("CV generation error")
        return error_response("Failed to generate CV")

    return CVGenerateResponse(message="CV generated successfully", data=record)


@router.post("/parse", responses=ERROR_RESPONSES)
async def parse(
    file: UploadFile | None = File(None),
    generator: ContentGenerator = Depends(get_content_generator),
):
    """Parse an uploaded CV (PDF or DOCX) into a draft CV."""
    if file is None:
        return error_response("No file provided", status_code=400)

    if file.content_type not in ALLOWED_CONTENT_TYPES:
        return error_response("Invalid file type. Please upload PDF, DOC, or DOCX", status_code=400)

    content = await file.read()
    if len(content) > settings.max_upload_size_mb * 1024 * 1024:
        return error_response(f"File too large. Max size: {settings.max_upload_size_mb}MB", status_code=400)

    try:
        text = extract_text(content, file.content_type)
    except DocumentParseError as e:
        logger.warning(f"Could not extract text from {file.filename}: {e}")
        return error_response("Could not extract text from file", status_code=400)

    try:
        parsed = await draft_from_document(text, generator)
    except Exception:
        logger.exception("CV parsing error")
        return error_response("Failed to parse CV")

    return success_response(parsed, message="CV parsed successfully")


@router.get("", responses=ERROR_RESPONSES)
def get_cv(user_id: str | None = Query(None, alias="userId")):
    """Fetch a user's CV."""
    if not user_id:
        return error_response("User ID is required", status_code=400)
    return success_response(sample_record(user_id))


@router.post("", status_code=201, responses=ERROR_RESPONSES)
async def create_cv(request: Request):
    """Create a CV draft. Nothing is persisted; the draft is echoed back with an id."""
    try:
        body = await request.json()
    except ValueError:
        logger.exception("CV create error")
        return error_response("Failed to create CV")

    personal_info = body.get("personalInfo") if isinstance(body, dict) else None
    if not isinstance(personal_info, dict) or not personal_info.get("fullName"):
        return error_response("Personal information is required", status_code=400)

    now = datetime.now(UTC)
    cv = {"id": generate_record_id("cv"), **body, "createdAt": now, "updatedAt": now}
    return success_response(cv, message="CV created successfully", status_code=201)


@router.put("", responses=ERROR_RESPONSES)
async def update_cv(request: Request):
    """Update a CV draft. Nothing is persisted; the draft is echoed back."""
    try:
        body = await request.json()
    except ValueError:
        logger.exception("CV update error")
        return error_response("Failed to update CV")

    if not isinstance(body, dict) or not body.get("id"):
        return error_response("CV ID is required", status_code=400)

    return success_response({**body, "updatedAt": datetime.now(UTC)}, message="CV updated successfully")

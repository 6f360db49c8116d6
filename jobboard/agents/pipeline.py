"""
CV Generation Pipeline.

validate -> personal info -> content generator -> assemble.
Also drafts CVs from uploaded documents through the same generator.
"""

import logging
import time
from datetime import UTC, date, datetime

from jobboard.agents.cv_generator import ContentGenerator
from jobboard.api.schemas import (
    CVGenerationInput,
    CVRecord,
    EducationEntry,
    ExperienceEntry,
    Language,
    ParsedCV,
    PersonalInfo,
)

logger = logging.getLogger(__name__)

DEFAULT_SUMMARY = "Professional with strong background in the industry."
PLACEHOLDER_USER_ID = "user-1"


class CVValidationError(ValueError):
    """Raised when required applicant fields are missing."""


def validate_input(data: CVGenerationInput) -> None:
    """Fail fast when name or email is missing."""
    if not data.full_name or not data.email:
        raise CVValidationError("Name and email are required")


def build_personal_info(data: CVGenerationInput) -> PersonalInfo:
    return PersonalInfo(
        full_name=data.full_name or "",
        email=data.email or "",
        phone=data.phone or "",
        location=data.location or "",
        linkedin=data.linkedin or "",
        portfolio=data.portfolio or "",
        summary=data.summary or DEFAULT_SUMMARY,
    )


def default_languages() -> list[Language]:
    return [Language(name="English", proficiency="native")]


def generate_record_id(prefix: str = "generated") -> str:
    """Timestamp-derived record id, e.g. `generated-1718000000000`."""
    return f"{prefix}-{time.time_ns() // 1_000_000}"


async def generate_cv(data: CVGenerationInput, generator: ContentGenerator) -> CVRecord:
    """
    Generate a complete CV record from applicant input.

    Args:
        data: Applicant input
        generator: Content generator producing the experience/education/skills sections

    Returns:
        Assembled CVRecord

    Raises:
        CVValidationError: If full name or email is missing
    """
    validate_input(data)

    personal_info = build_personal_info(data)
    sections = await generator.draft(data)

    now = datetime.now(UTC)
    record = CVRecord(
        id=generate_record_id(),
        user_id=PLACEHOLDER_USER_ID,
        personal_info=personal_info,
        experience=sections.experience,
        education=sections.education,
        skills=sections.skills,
        certifications=[],
        languages=default_languages(),
        created_at=now,
        updated_at=now,
    )
    logger.info(
        f"Generated CV {record.id}: {len(record.experience)} experience, "
        f"{len(record.education)} education, {len(record.skills)} skills"
    )
    return record


async def draft_from_document(text: str, generator: ContentGenerator) -> ParsedCV:
    """Run extracted document text through the generator as work history."""
    sections = await generator.draft(CVGenerationInput(experience=text))
    return ParsedCV(
        personal_info=PersonalInfo(full_name="", email=""),
        experience=sections.experience,
        education=sections.education,
        skills=sections.skills,
        languages=default_languages(),
        raw_text=text,
    )


def sample_record(user_id: str) -> CVRecord:
    """Example CV served until a CV store is wired in."""
    now = datetime.now(UTC)
    return CVRecord(
        id="cv-1",
        user_id=user_id,
        personal_info=PersonalInfo(
            full_name="John Doe",
            email="john.doe@email.com",
            phone="+1 (555) 123-4567",
            location="San Francisco, CA",
            linkedin="linkedin.com/in/johndoe",
            summary="Full-stack developer with 5 years of experience building web applications.",
        ),
        experience=[
            ExperienceEntry(
                id="exp1",
                company="Tech Corp",
                position="Senior Developer",
                location="San Francisco, CA",
                start_date=date(2021, 3, 1),
                current=True,
                description="Building customer-facing web applications",
                achievements=["Led migration to microservices", "Mentored 3 junior developers"],
            )
        ],
        education=[
            EducationEntry(
                id="edu1",
                institution="State University",
                degree="Bachelor of Science",
                field="Computer Science",
                location="California",
                start_date=date(2014, 9, 1),
                end_date=date(2018, 6, 1),
            )
        ],
        skills=["JavaScript", "TypeScript", "React", "Node.js", "Python"],
        languages=default_languages(),
        created_at=now,
        updated_at=now,
    )

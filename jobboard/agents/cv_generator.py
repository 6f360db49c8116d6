"""
CV Content Generator.

Turns applicant free text into draft CV sections. The heuristic
implementation below is a placeholder for an external generation
provider; anything implementing `ContentGenerator` can replace it.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol

from jobboard.api.schemas import CVGenerationInput, EducationEntry, ExperienceEntry
from jobboard.config import settings
from jobboard.utils.text import non_blank_lines, split_skills, truncate

logger = logging.getLogger(__name__)

DESCRIPTION_MAX_CHARS = 200
MAX_ACHIEVEMENTS = 3


@dataclass
class DraftSections:
    """Sections produced by a content generator."""

    experience: list[ExperienceEntry] = field(default_factory=list)
    education: list[EducationEntry] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)


class ContentGenerator(Protocol):
    """Produces draft CV sections from applicant input."""

    async def draft(self, data: CVGenerationInput) -> DraftSections: ...


def extract_experience(text: str | None) -> list[ExperienceEntry]:
    """Build at most one experience entry from free text."""
    if not text:
        return []

    return [
        ExperienceEntry(
            id="exp1",
            company="Example Company",
            position="Software Engineer",
            location="Remote",
            start_date=date(2020, 1, 1),
            current=True,
            description=truncate(text, DESCRIPTION_MAX_CHARS),
            achievements=non_blank_lines(text, limit=MAX_ACHIEVEMENTS),
        )
    ]


def extract_education(text: str | None) -> list[EducationEntry]:
    """Build at most one education entry. The text only signals presence."""
    if not text:
        return []

    return [
        EducationEntry(
            id="edu1",
            institution="University",
            degree="Bachelor of Science",
            field="Computer Science",
            location="USA",
            start_date=date(2015, 9, 1),
            end_date=date(2019, 6, 1),
        )
    ]


class HeuristicContentGenerator:
    """Rule-based generator with a simulated provider round trip."""

    def __init__(self, delay: float | None = None):
        self.delay = settings.cv_generation_delay if delay is None else delay

    async def draft(self, data: CVGenerationInput) -> DraftSections:
        sections = DraftSections(
            experience=extract_experience(data.experience),
            education=extract_education(data.education),
            skills=split_skills(data.skills),
        )
        await self._simulate_latency()
        return sections

    async def _simulate_latency(self) -> None:
        # Stand-in for the network call to a generation provider
        if self.delay > 0:
            logger.debug(f"Simulating generation latency: {self.delay}s")
            await asyncio.sleep(self.delay)


def get_content_generator() -> ContentGenerator:
    """FastAPI dependency for the content generator."""
    return HeuristicContentGenerator()

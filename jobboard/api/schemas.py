"""API request/response schemas."""

from datetime import date, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_serializer
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys on the wire."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CompactModel(CamelModel):
    """Leaves optional keys out of the output when they are unset."""

    @model_serializer(mode="wrap")
    def _drop_none(self, handler):
        return {key: value for key, value in handler(self).items() if value is not None}


# CV generation input
class CVGenerationInput(CamelModel):
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    portfolio: str | None = None
    summary: str | None = None
    experience: str | None = Field(default=None, description="Free-text work history")
    education: str | None = Field(default=None, description="Free-text education history")
    skills: str | None = Field(default=None, description="Comma-separated skills")

    @field_validator("*", mode="before")
    @classmethod
    def _loose_text(cls, value: Any) -> str | None:
        # Falsy values count as missing; other scalars are stringified; containers are dropped
        if isinstance(value, str):
            return value
        if not value or not isinstance(value, (bool, int, float)):
            return None
        if isinstance(value, bool):
            return "true"
        return str(value)


# CV record schemas
class PersonalInfo(CamelModel):
    full_name: str
    email: str
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    portfolio: str = ""
    summary: str = ""


class ExperienceEntry(CompactModel):
    id: str
    company: str
    position: str
    location: str
    start_date: date
    end_date: date | None = None
    current: bool = False
    description: str = ""
    achievements: list[str] = Field(default_factory=list)


class EducationEntry(CompactModel):
    id: str
    institution: str
    degree: str
    field: str
    location: str
    start_date: date
    end_date: date | None = None
    gpa: float | None = None


class Certification(CompactModel):
    id: str
    name: str
    issuer: str
    issued_on: date = Field(alias="date")
    expiry_date: date | None = None
    credential_id: str | None = None


class Language(CamelModel):
    name: str
    proficiency: Literal["basic", "intermediate", "advanced", "native"]


class CVRecord(CamelModel):
    id: str
    user_id: str
    personal_info: PersonalInfo
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)
    languages: list[Language] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class ParsedCV(CamelModel):
    """CV draft extracted from an uploaded document (no identity yet)."""

    personal_info: PersonalInfo
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)
    languages: list[Language] = Field(default_factory=list)
    raw_text: str = ""


# Envelopes
class CVGenerateResponse(BaseModel):
    success: bool = True
    message: str
    data: CVRecord


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class HealthResponse(BaseModel):
    status: str

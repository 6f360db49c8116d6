"""
Tests for the CV generation pipeline and the heuristic content generator.
"""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from jobboard.agents import cv_generator
from jobboard.agents.cv_generator import (
    DraftSections,
    HeuristicContentGenerator,
    extract_education,
    extract_experience,
)
from jobboard.agents.pipeline import (
    DEFAULT_SUMMARY,
    CVValidationError,
    draft_from_document,
    generate_cv,
    sample_record,
)
from jobboard.api.schemas import CVGenerationInput


class RecordingGenerator:
    """Generator stub that records calls and returns fixed sections."""

    def __init__(self, sections: DraftSections | None = None):
        self.calls = []
        self.sections = sections or DraftSections()

    async def draft(self, data):
        self.calls.append(data)
        return self.sections


@pytest.fixture
def generator():
    return HeuristicContentGenerator(delay=0)


def make_input(**overrides) -> CVGenerationInput:
    fields = {"fullName": "Ada Lovelace", "email": "ada@example.com"}
    fields.update(overrides)
    return CVGenerationInput.model_validate(fields)


class TestValidation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [{"fullName": ""}, {"email": ""}, {"fullName": None}, {"fullName": "", "email": ""}],
    )
    async def test_missing_required_fields(self, overrides):
        stub = RecordingGenerator()

        with pytest.raises(CVValidationError, match="Name and email are required"):
            await generate_cv(make_input(**overrides), stub)

        assert stub.calls == []

    @pytest.mark.parametrize(
        "raw, expected",
        [(42, "42"), (1.5, "1.5"), (True, "true"), (0, None), (False, None), ([1], None), ({"a": 1}, None)],
    )
    def test_input_fields_loosely_typed(self, raw, expected):
        data = CVGenerationInput.model_validate({"fullName": raw, "skills": raw})

        assert data.full_name == expected
        assert data.skills == expected

    @pytest.mark.asyncio
    async def test_optional_fields_default(self, generator):
        record = await generate_cv(make_input(), generator)

        info = record.personal_info
        assert info.full_name == "Ada Lovelace"
        assert info.email == "ada@example.com"
        assert (info.phone, info.location, info.linkedin, info.portfolio) == ("", "", "", "")
        assert info.summary == DEFAULT_SUMMARY

    @pytest.mark.asyncio
    async def test_summary_kept_when_given(self, generator):
        record = await generate_cv(make_input(summary="Analyst and writer."), generator)

        assert record.personal_info.summary == "Analyst and writer."


class TestExperience:
    def test_first_three_non_blank_lines(self):
        entries = extract_experience("Built systems.\nLed team.\nShipped v1.\nExtra line.")

        assert len(entries) == 1
        assert entries[0].achievements == ["Built systems.", "Led team.", "Shipped v1."]

    def test_blank_lines_skipped(self):
        entries = extract_experience("\nBuilt systems.\n   \n\nLed team.\n")

        assert entries[0].achievements == ["Built systems.", "Led team."]

    def test_placeholder_fields(self):
        entry = extract_experience("Did things.")[0]

        assert entry.company == "Example Company"
        assert entry.position == "Software Engineer"
        assert entry.location == "Remote"
        assert entry.start_date == date(2020, 1, 1)
        assert entry.current is True

    def test_description_truncated(self):
        text = "x" * 250

        entry = extract_experience(text)[0]

        assert entry.description == "x" * 200

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_text_yields_nothing(self, text):
        assert extract_experience(text) == []


class TestEducation:
    def test_fixed_entry_regardless_of_text(self):
        first = extract_education("MIT, MSc Physics")
        second = extract_education("Self-taught")

        assert first == second
        assert first[0].institution == "University"
        assert first[0].degree == "Bachelor of Science"
        assert first[0].field == "Computer Science"
        assert first[0].end_date == date(2019, 6, 1)

    def test_empty_text_yields_nothing(self):
        assert extract_education("") == []


class TestAssembly:
    @pytest.mark.asyncio
    async def test_skills_trimmed_and_ordered(self, generator):
        record = await generate_cv(make_input(skills="Go, Python ,  Rust,"), generator)

        assert record.skills == ["Go", "Python", "Rust"]

    @pytest.mark.asyncio
    async def test_skills_not_deduplicated(self, generator):
        record = await generate_cv(make_input(skills="Go,Go, go"), generator)

        assert record.skills == ["Go", "Go", "go"]

    @pytest.mark.asyncio
    async def test_empty_experience(self, generator):
        record = await generate_cv(make_input(experience=""), generator)

        assert record.experience == []

    @pytest.mark.asyncio
    async def test_fixed_sections(self, generator):
        record = await generate_cv(make_input(), generator)

        assert record.id.startswith("generated-")
        assert record.user_id == "user-1"
        assert record.certifications == []
        assert [(lang.name, lang.proficiency) for lang in record.languages] == [("English", "native")]
        assert record.created_at == record.updated_at

    @pytest.mark.asyncio
    async def test_same_input_same_content(self, generator):
        data = make_input(
            experience="Built systems.\nLed team.",
            education="BSc",
            skills="Go, Python",
            location="Berlin",
        )
        volatile = {"id", "created_at", "updated_at"}

        first = await generate_cv(data, generator)
        second = await generate_cv(data, generator)

        assert first.model_dump(exclude=volatile) == second.model_dump(exclude=volatile)

    @pytest.mark.asyncio
    async def test_generator_is_swappable(self):
        stub = RecordingGenerator(DraftSections(skills=["Prompted skill"]))
        data = make_input(skills="Go")

        record = await generate_cv(data, stub)

        assert stub.calls == [data]
        assert record.skills == ["Prompted skill"]
        assert record.personal_info.full_name == "Ada Lovelace"


class TestSimulatedLatency:
    @pytest.mark.asyncio
    async def test_waits_configured_delay(self, monkeypatch):
        sleep = AsyncMock()
        monkeypatch.setattr(cv_generator.asyncio, "sleep", sleep)

        await HeuristicContentGenerator(delay=1.5).draft(make_input())

        sleep.assert_awaited_once_with(1.5)

    @pytest.mark.asyncio
    async def test_zero_delay_skips_wait(self, monkeypatch):
        sleep = AsyncMock()
        monkeypatch.setattr(cv_generator.asyncio, "sleep", sleep)

        await HeuristicContentGenerator(delay=0).draft(make_input())

        sleep.assert_not_awaited()


class TestDocumentDraft:
    @pytest.mark.asyncio
    async def test_text_used_as_experience(self, generator):
        parsed = await draft_from_document("Jane Smith\nEngineer at Acme\nPython, AWS\nMore", generator)

        assert parsed.experience[0].achievements == ["Jane Smith", "Engineer at Acme", "Python, AWS"]
        assert parsed.education == []
        assert parsed.skills == []
        assert parsed.raw_text.startswith("Jane Smith")


def test_sample_record_uses_requested_user():
    record = sample_record("user-77")

    assert record.user_id == "user-77"
    assert record.personal_info.full_name

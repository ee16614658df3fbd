"""
Resume data model: raw form input, contact header, and the AI-produced structured resume
"""
from __future__ import annotations

import json
import re
from dataclasses import asdict, dataclass, fields
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from errors import ParseError

# "85", "85%", "85/100": the leading whole number is the score
_LEADING_SCORE = re.compile(r"^([0-9]+)")


@dataclass(frozen=True)
class ContactInfo:
    """Header fields for the exported document; the AI response does not repeat them."""

    full_name: str
    email: str
    phone: str
    linkedin: str


@dataclass(frozen=True)
class RawResumeInput:
    """Snapshot of the ten form fields taken at submission time."""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    education: str = ""
    experience: str = ""
    skills: str = ""
    objective: str = ""
    projects: str = ""
    other_details: str = ""

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "RawResumeInput":
        values = {}
        for name in cls.field_names():
            value = data.get(name)
            values[name] = "" if value is None else str(value)
        return cls(**values)

    @property
    def contact(self) -> ContactInfo:
        return ContactInfo(
            full_name=self.full_name,
            email=self.email,
            phone=self.phone,
            linkedin=self.linkedin,
        )

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def _stringify_scalar(value: Any) -> Any:
    # Models sometimes emit years and scores as bare numbers
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return str(value)
    return value


class Education(BaseModel):
    degree: str
    institution: str
    year: str
    details: str = ""

    @field_validator("year", mode="before")
    @classmethod
    def _year_as_text(cls, value: Any) -> Any:
        return _stringify_scalar(value)

    @field_validator("details", mode="before")
    @classmethod
    def _details_default(cls, value: Any) -> Any:
        return "" if value is None else value


class Experience(BaseModel):
    company: str
    role: str
    duration: str
    achievements: list[str]


class Project(BaseModel):
    title: str
    description: str


class StructuredResume(BaseModel):
    """Resume record returned by the model; list order is display order."""

    model_config = ConfigDict(extra="ignore")

    summary: str
    education: list[Education]
    experience: list[Experience]
    skills: list[str]
    projects: list[Project]
    ats_keywords: list[str]
    ats_score: str
    improvement_suggestions: list[str]
    additional_information: list[str] = []

    @field_validator("ats_score", mode="before")
    @classmethod
    def _score_is_numeric(cls, value: Any) -> Any:
        value = _stringify_scalar(value)
        if isinstance(value, str):
            value = value.strip()
            match = _LEADING_SCORE.match(value)
            if match is None:
                raise ValueError(f"ats_score must start with a whole number, got {value!r}")
            score = int(match.group(1))
            if score > 100:
                raise ValueError(f"ats_score must be between 0 and 100, got {score}")
        return value

    @field_validator("additional_information", mode="before")
    @classmethod
    def _absent_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def score_value(self) -> int:
        """Leading whole number of ats_score; the raw string is kept for display."""
        return int(_LEADING_SCORE.match(self.ats_score).group(1))

    @property
    def has_additional_information(self) -> bool:
        """Present-and-non-empty vs. absent/empty; every renderer keys off this."""
        return len(self.additional_information) > 0


def parse_structured_resume(text: str) -> StructuredResume:
    """Parse model output text into a StructuredResume or raise ParseError."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Failed to parse AI response as JSON: {e}") from e
    if not isinstance(payload, dict):
        raise ParseError(
            f"Failed to parse AI response: expected a JSON object, got {type(payload).__name__}"
        )
    try:
        return StructuredResume.model_validate(payload)
    except ValidationError as e:
        raise ParseError(f"AI response does not match the resume format: {e}") from e


def resume_to_json(resume: StructuredResume) -> str:
    """Pretty JSON (indent 2), the text copied to the clipboard."""
    return json.dumps(resume.model_dump(), indent=2, ensure_ascii=False)

"""
Helpers that turn a StructuredResume into what the result panel shows
"""
from __future__ import annotations

from typing import Any

from resume_models import StructuredResume

SCORE_COLORS = {
    "green": "bg-green",
    "amber": "bg-amber",
    "red": "bg-red",
}


def score_color(score: int) -> str:
    """Badge colour for an ATS score; each tier's lower bound is inclusive."""
    if score >= 90:
        return "green"
    if score >= 80:
        return "amber"
    return "red"


def build_sections(resume: StructuredResume) -> list[dict[str, Any]]:
    """
    Ordered list of display sections.

    Each entry has a ``title``, a ``kind`` telling the template how to draw
    it (paragraph, experience, education, projects, bullets, tags) and the
    ``items`` to draw. Additional Information is included only when the
    resume carries any.
    """
    sections: list[dict[str, Any]] = [
        {"title": "Professional Summary", "kind": "paragraph", "items": [resume.summary]},
        {"title": "Experience", "kind": "experience", "items": resume.experience},
        {"title": "Education", "kind": "education", "items": resume.education},
        {"title": "Projects", "kind": "projects", "items": resume.projects},
    ]
    if resume.has_additional_information:
        sections.append(
            {"title": "Additional Information", "kind": "bullets", "items": resume.additional_information}
        )
    sections.extend([
        {"title": "Skills", "kind": "tags", "items": resume.skills},
        {"title": "ATS Keywords", "kind": "tags", "items": resume.ats_keywords},
        {"title": "Improvement Suggestions", "kind": "bullets", "items": resume.improvement_suggestions},
    ])
    return sections


def display_context(resume: StructuredResume) -> dict[str, Any]:
    color = score_color(resume.score_value)
    return {
        "score": resume.ats_score,
        "score_color": color,
        "score_class": SCORE_COLORS[color],
        "sections": build_sections(resume),
    }

"""
Form surface for the resume builder: field definitions, sample values and required-field checks
"""
from __future__ import annotations

from typing import Any

from resume_models import RawResumeInput

# Display order of the form; the first four are single-line contact fields
FORM_FIELDS: list[dict[str, Any]] = [
    {"name": "full_name", "label": "Full Name", "multiline": False, "required": True, "placeholder": "", "type": "text"},
    {"name": "email", "label": "Email", "multiline": False, "required": True, "placeholder": "", "type": "email"},
    {"name": "phone", "label": "Phone", "multiline": False, "required": True, "placeholder": "", "type": "tel"},
    {"name": "linkedin", "label": "LinkedIn Profile URL", "multiline": False, "required": True, "placeholder": "", "type": "text"},
    {
        "name": "objective",
        "label": "Career Objective",
        "multiline": True,
        "required": True,
        "placeholder": "e.g., A highly motivated software engineer seeking...",
        "type": "text",
    },
    {
        "name": "skills",
        "label": "Skills (comma-separated)",
        "multiline": True,
        "required": True,
        "placeholder": "e.g., React, TypeScript, Node.js",
        "type": "text",
    },
    {
        "name": "experience",
        "label": "Experience (Provide details on separate lines)",
        "multiline": True,
        "required": True,
        "placeholder": "Company Name - Role (Date Range)\n- Achievement 1\n- Achievement 2",
        "type": "text",
    },
    {
        "name": "education",
        "label": "Education",
        "multiline": True,
        "required": True,
        "placeholder": "Degree, University, Year",
        "type": "text",
    },
    {
        "name": "projects",
        "label": "Projects",
        "multiline": True,
        "required": True,
        "placeholder": "Project Title - Description",
        "type": "text",
    },
    {
        "name": "other_details",
        "label": "Other Details (Optional)",
        "multiline": True,
        "required": False,
        "placeholder": "e.g., Certifications, Awards, Languages...",
        "type": "text",
    },
]

# Illustrative values so the form can be submitted without edits
SAMPLE_VALUES: dict[str, str] = {
    "full_name": "Riya Patel",
    "email": "riya.patel@gmail.com",
    "phone": "9876543210",
    "linkedin": "linkedin.com/in/riyapatel",
    "education": "B.Tech in Computer Engineering, Gujarat Technological University, 2024",
    "experience": (
        "Intern - Web Developer at Sanskritix Global (June 2023 – Sept 2023)\n"
        "- Developed responsive web pages using React and Tailwind CSS.\n"
        "- Optimized website load time by 35% improving user engagement."
    ),
    "skills": "HTML, CSS, JavaScript, React, Node.js, Git",
    "objective": "To secure a front-end developer position in a growth-oriented company.",
    "projects": "Portfolio Website – Designed a responsive personal website using React and Tailwind CSS.",
    "other_details": "Certified AWS Cloud Practitioner (2023)\nWinner of Smart India Hackathon (2022)",
}


def default_form() -> dict[str, str]:
    return dict(SAMPLE_VALUES)


def form_values(data: Any) -> dict[str, str]:
    """Pull the ten fields out of a request mapping; absent fields become empty strings."""
    values: dict[str, str] = {}
    for field in FORM_FIELDS:
        value = data.get(field["name"]) if data else None
        values[field["name"]] = "" if value is None else str(value)
    return values


def validate_form(values: dict[str, str]) -> list[str]:
    """Return the labels of required fields left blank."""
    missing = []
    for field in FORM_FIELDS:
        if field["required"] and not (values.get(field["name"]) or "").strip():
            missing.append(field["label"])
    return missing


def snapshot_form(values: dict[str, str]) -> RawResumeInput:
    return RawResumeInput.from_mapping(values)

import json

import pytest

from resume_models import RawResumeInput, StructuredResume


class FakeLLM:
    """Stands in for LLMManager; records prompts and replays a canned response."""

    def __init__(self, response_text="", error=None):
        self.response_text = response_text
        self.error = error
        self.prompts = []

    def generate(self, prompt, json_output=True):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response_text


def jane_resume_payload() -> dict:
    return {
        "summary": "Data analyst with a focus on reporting.",
        "education": [],
        "experience": [],
        "skills": ["SQL"],
        "projects": [],
        "ats_keywords": ["SQL"],
        "ats_score": "85",
        "improvement_suggestions": [],
        "additional_information": [],
    }


def full_resume_payload() -> dict:
    return {
        "summary": "Front-end developer who ships accessible, fast interfaces.",
        "education": [
            {
                "degree": "B.Tech in Computer Engineering",
                "institution": "Gujarat Technological University",
                "year": "2024",
                "details": "CGPA 8.9",
            }
        ],
        "experience": [
            {
                "company": "Sanskritix Global",
                "role": "Web Developer Intern",
                "duration": "June 2023 - Sept 2023",
                "achievements": [
                    "Developed responsive web pages using React and Tailwind CSS",
                    "Optimized website load time by 35%",
                ],
            }
        ],
        "skills": ["React", "JavaScript", "Git"],
        "projects": [
            {"title": "Portfolio Website", "description": "Responsive personal website built with React."}
        ],
        "ats_keywords": ["React", "Front-end"],
        "ats_score": "92",
        "improvement_suggestions": ["Quantify more achievements"],
        "additional_information": ["Certified AWS Cloud Practitioner (2023)"],
    }


@pytest.fixture
def jane_input() -> RawResumeInput:
    return RawResumeInput(
        full_name="Jane Doe",
        email="jane@example.com",
        phone="555-0100",
        linkedin="linkedin.com/in/janedoe",
        education="BSc Statistics, State University, 2020",
        experience="Analyst at Acme (2020 - 2024)\n- Built weekly SQL reports",
        skills="SQL",
        objective="Grow as a data analyst.",
        projects="Sales dashboard - SQL and charts",
        other_details="",
    )


@pytest.fixture
def jane_resume() -> StructuredResume:
    return StructuredResume.model_validate(jane_resume_payload())


@pytest.fixture
def full_resume() -> StructuredResume:
    return StructuredResume.model_validate(full_resume_payload())


@pytest.fixture
def long_resume() -> StructuredResume:
    payload = full_resume_payload()
    achievement = (
        "Led a cross-functional initiative that rebuilt the reporting pipeline, "
        "cutting turnaround from days to hours and improving data quality across teams"
    )
    payload["experience"] = [
        {
            "company": f"Company {i}",
            "role": f"Engineer {i}",
            "duration": "2015 - 2020",
            "achievements": [achievement] * 5,
        }
        for i in range(12)
    ]
    return StructuredResume.model_validate(payload)


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)


def as_json(payload: dict) -> str:
    return json.dumps(payload)

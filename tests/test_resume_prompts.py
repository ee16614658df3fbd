from resume_models import RawResumeInput
from resume_prompts import build_resume_prompt


def test_prompt_embeds_every_field_in_form_order() -> None:
    form = RawResumeInput(
        full_name="Riya Patel",
        email="riya@example.com",
        phone="9876543210",
        linkedin="linkedin.com/in/riya",
        education="B.Tech, GTU, 2024",
        experience="Intern at Acme\n- Did things\n- Did more things",
        skills="HTML, CSS, React",
        objective="Front-end role",
        projects="Portfolio - React site",
        other_details="AWS Cloud Practitioner (2023)",
    )
    prompt = build_resume_prompt(form)

    positions = []
    for value in form.to_dict().values():
        assert value in prompt
        positions.append(prompt.index(value))
    assert positions == sorted(positions)


def test_prompt_keeps_multiline_text_untouched() -> None:
    experience = "  Analyst - Acme (2020)\n\n- Line one\n- Line two with trailing space  "
    prompt = build_resume_prompt(RawResumeInput(full_name="A", experience=experience))
    assert f"Experience:\n{experience}\n" in prompt


def test_prompt_tolerates_braces_in_user_text() -> None:
    prompt = build_resume_prompt(RawResumeInput(projects="Templating with {name} and {{ jinja }}"))
    assert "Templating with {name} and {{ jinja }}" in prompt


def test_prompt_carries_output_shape_and_rules(jane_input) -> None:
    prompt = build_resume_prompt(jane_input)
    for key in (
        '"summary"',
        '"education"',
        '"experience"',
        '"achievements"',
        '"skills"',
        '"projects"',
        '"ats_keywords"',
        '"ats_score"',
        '"improvement_suggestions"',
        '"additional_information"',
    ):
        assert key in prompt
    assert "return an empty array for 'additional_information'" in prompt
    assert "Do not include Markdown" in prompt

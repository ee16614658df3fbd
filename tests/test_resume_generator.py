import asyncio
import json

import pytest

from conftest import FakeLLM, jane_resume_payload
from errors import ConfigurationError, ParseError, ServiceError
from resume_generator import ResumeGenerator, clean_json_output


def _generator(fake: FakeLLM, seen_keys: list | None = None) -> ResumeGenerator:
    def factory(api_key):
        if seen_keys is not None:
            seen_keys.append(api_key)
        return fake

    return ResumeGenerator(client_factory=factory)


@pytest.mark.parametrize(
    "raw",
    [
        '{"a": 1}',
        '```json\n{"a": 1}\n```',
        '```\n{"a": 1}\n```',
        '  ```json{"a": 1}```  ',
        '```JSON\n{"a": 1}\n```',
        '```Json {"a": 1}```',
    ],
)
def test_clean_json_output_strips_fences(raw) -> None:
    assert clean_json_output(raw) == '{"a": 1}'


def test_generate_returns_structured_resume(api_key, jane_input) -> None:
    fake = FakeLLM(json.dumps(jane_resume_payload()))
    seen_keys: list = []
    resume = asyncio.run(_generator(fake, seen_keys).generate(jane_input))

    assert resume.skills == ["SQL"]
    assert resume.ats_score == "85"
    assert seen_keys == ["test-key"]
    assert "Full Name: Jane Doe" in fake.prompts[0]


@pytest.mark.parametrize("fence", ["```json", "```JSON", "```"])
def test_generate_tolerates_fenced_response(api_key, jane_input, fence) -> None:
    fake = FakeLLM(fence + "\n" + json.dumps(jane_resume_payload()) + "\n```")
    resume = asyncio.run(_generator(fake).generate(jane_input))
    assert resume.summary == "Data analyst with a focus on reporting."


def test_missing_key_fails_before_any_call(no_api_key, jane_input) -> None:
    fake = FakeLLM(json.dumps(jane_resume_payload()))
    seen_keys: list = []
    with pytest.raises(ConfigurationError) as exc:
        asyncio.run(_generator(fake, seen_keys).generate(jane_input))
    assert "GEMINI_API_KEY" in str(exc.value)
    assert seen_keys == []
    assert fake.prompts == []


def test_fallback_key_name_is_accepted(no_api_key, monkeypatch, jane_input) -> None:
    monkeypatch.setenv("API_KEY", "fallback-key")
    seen_keys: list = []
    asyncio.run(_generator(FakeLLM(json.dumps(jane_resume_payload())), seen_keys).generate(jane_input))
    assert seen_keys == ["fallback-key"]


def test_service_failure_is_wrapped(api_key, jane_input) -> None:
    fake = FakeLLM(error=RuntimeError("429 quota exceeded"))
    with pytest.raises(ServiceError) as exc:
        asyncio.run(_generator(fake).generate(jane_input))
    assert str(exc.value) == "Failed to generate resume from AI: 429 quota exceeded"
    # a single attempt, no retries
    assert len(fake.prompts) == 1


def test_empty_response_is_service_error(api_key, jane_input) -> None:
    with pytest.raises(ServiceError):
        asyncio.run(_generator(FakeLLM("   ")).generate(jane_input))


@pytest.mark.parametrize(
    "response_text",
    [
        "Sorry, I cannot help with that.",
        json.dumps({k: v for k, v in jane_resume_payload().items() if k != "skills"}),
        "```json\n{\"summary\": \"cut off\n```",
    ],
)
def test_malformed_response_is_parse_error(api_key, jane_input, response_text) -> None:
    with pytest.raises(ParseError):
        asyncio.run(_generator(FakeLLM(response_text)).generate(jane_input))

"""
Resume generation: prompt Gemini with the user's details and parse the structured resume it returns
"""
from __future__ import annotations

import asyncio
import re
from typing import Any, Callable, Optional

from config import get_api_key
from errors import ParseError, ServiceError
from llm_manager import LLMManager
from resume_models import RawResumeInput, StructuredResume, parse_structured_resume
from resume_prompts import build_resume_prompt

_LEADING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\s*```$")


def clean_json_output(text: str) -> str:
    """Removes markdown-style ```json and ``` fences from model output."""
    text = _LEADING_FENCE.sub("", text.strip())
    text = _TRAILING_FENCE.sub("", text)
    return text.strip()


class ResumeGenerator:
    """
    Runs one generation request end to end.

    client_factory receives the API key and returns an object with a
    ``generate(prompt, json_output=True)`` method; it defaults to LLMManager.
    """

    def __init__(self, client_factory: Optional[Callable[[str], Any]] = None, model_name: Optional[str] = None):
        self.client_factory = client_factory or (lambda api_key: LLMManager(api_key, model_name=model_name))

    async def generate(self, form: RawResumeInput) -> StructuredResume:
        """
        Generate a structured resume from the submitted form.

        Raises:
            ConfigurationError: no Gemini key is configured; nothing was sent
            ServiceError: the Gemini call failed or returned no text
            ParseError: the response is not a resume-shaped JSON object
        """
        api_key = get_api_key()
        prompt = build_resume_prompt(form)

        print(f"[generator] 🤖 Generating resume for {form.full_name or 'candidate'}...")
        try:
            client = self.client_factory(api_key)
            raw_text = await asyncio.to_thread(client.generate, prompt, json_output=True)
        except Exception as e:
            print(f"[generator] ❌ Error calling Gemini API: {e}")
            raise ServiceError(f"Failed to generate resume from AI: {e}") from e

        if not raw_text or not raw_text.strip():
            print("[generator] ❌ Gemini returned an empty response")
            raise ServiceError("Failed to generate resume from AI: empty response")

        try:
            resume = parse_structured_resume(clean_json_output(raw_text))
        except ParseError as e:
            print(f"[generator] ❌ {e}")
            raise
        print(
            f"[generator] ✅ Resume generated: {len(resume.experience)} experience entries, "
            f"ATS score {resume.ats_score}"
        )
        return resume


async def generate_resume(form: RawResumeInput) -> StructuredResume:
    """Generate with the default Gemini client."""
    return await ResumeGenerator().generate(form)

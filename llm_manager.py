"""
LLM Manager - Google Gemini client for resume generation
A single call per request; retries and provider fallback are left to the user re-submitting.
"""

import os

import google.generativeai as genai

from config import DEFAULT_GEMINI_MODEL


class LLMManager:
    def __init__(self, api_key, model_name=None):
        """
        The API key is passed in by the caller, which reads it from the
        environment at request time. Model defaults to GEMINI_MODEL.
        """
        self.provider = 'gemini'
        self.model_name = model_name or os.getenv('GEMINI_MODEL', DEFAULT_GEMINI_MODEL)
        genai.configure(api_key=api_key)
        self.client = genai.GenerativeModel(self.model_name)
        print(f"[llm] ✓ Using Google Gemini model: {self.model_name}")

    def generate(self, prompt, json_output=True):
        """Send the prompt to Gemini and return the response text."""
        generation_config = {}
        if json_output:
            generation_config['response_mime_type'] = 'application/json'
        response = self.client.generate_content(
            prompt,
            generation_config=generation_config
        )
        # response.text raises when the candidate was blocked; the caller reports it
        return (response.text or "").strip()

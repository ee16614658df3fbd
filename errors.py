from __future__ import annotations


class ResumeGenerationError(Exception):
    """Base class for failures surfaced to the user while generating a resume."""

    status_code = 500

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(ResumeGenerationError):
    """The Gemini credential is missing; no request was attempted."""

    status_code = 503


class ServiceError(ResumeGenerationError):
    """The Gemini call failed or returned nothing usable."""

    status_code = 502


class ParseError(ResumeGenerationError):
    """The model response was not JSON in the structured resume shape."""

    status_code = 502

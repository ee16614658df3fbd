"""
Generation outcome for the single interactive session.

One ResumeSession is created per app and handed to the views; it is never a
module-level global. Each submission bumps a token, and a completion that
arrives with an older token is dropped.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from resume_models import RawResumeInput, StructuredResume


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    snapshot: RawResumeInput


@dataclass(frozen=True)
class Success:
    resume: StructuredResume
    snapshot: RawResumeInput


@dataclass(frozen=True)
class Failure:
    message: str
    snapshot: RawResumeInput


GenerationOutcome = Union[Idle, Loading, Success, Failure]


class ResumeSession:
    def __init__(self) -> None:
        self.outcome: GenerationOutcome = Idle()
        self.form_values: Optional[dict[str, str]] = None
        self._token = 0

    @property
    def is_loading(self) -> bool:
        return isinstance(self.outcome, Loading)

    def start(self, snapshot: RawResumeInput) -> int:
        """Discard the previous outcome and mark a new request as in flight."""
        self._token += 1
        self.outcome = Loading(snapshot)
        self.form_values = snapshot.to_dict()
        return self._token

    def succeed(self, token: int, resume: StructuredResume) -> bool:
        if not self._is_current(token):
            return False
        self.outcome = Success(resume=resume, snapshot=self.outcome.snapshot)
        return True

    def fail(self, token: int, message: str) -> bool:
        if not self._is_current(token):
            return False
        self.outcome = Failure(message=message, snapshot=self.outcome.snapshot)
        return True

    def current_result(self) -> Optional[Success]:
        return self.outcome if isinstance(self.outcome, Success) else None

    def _is_current(self, token: int) -> bool:
        return token == self._token and isinstance(self.outcome, Loading)

"""
Exception hierarchy for the quote quiz core

Hint reveals and guesses never raise; only scene acquisition can fail.
All of these are recoverable by letting the player retry.
"""
from typing import Optional


class QuoteQuizError(Exception):
    """Base exception for all quote quiz errors"""
    pass


class NoValidSceneFound(QuoteQuizError):
    """Raised when acquisition exhausts its attempt budget without an acceptable scene"""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(
            f"Could not find valid scene after {attempts} attempts"
        )


class FetchFailed(QuoteQuizError):
    """Raised when the scene provider errors or returns malformed data"""

    def __init__(self, reason: str, status_code: Optional[int] = None):
        self.reason = reason
        self.status_code = status_code
        message = f"Scene fetch failed: {reason}"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        super().__init__(message)


class AcquisitionInProgress(QuoteQuizError):
    """Raised when a new round is requested while a scene fetch is still in flight"""

    def __init__(self):
        super().__init__("A new round is already being loaded")

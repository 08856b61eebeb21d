"""Error taxonomy for the word analysis pipeline."""
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class ErrorInfo:
    """Structured error information attached to every pipeline failure."""
    code: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


class AnalysisError(Exception):
    """Base exception for analysis failures with structured error information."""

    def __init__(self, error: ErrorInfo):
        self.error = error
        super().__init__(error.message)


class InvalidInputError(AnalysisError):
    """Raised when the URL or topN is rejected before any network call."""


class FetchError(AnalysisError):
    """Raised when the target page cannot be retrieved or read."""

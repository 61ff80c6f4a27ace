"""Record Value Objects"""
from .submission import SubmissionRequest, SubmissionResult

__all__ = ["SubmissionRequest", "SubmissionResult"]

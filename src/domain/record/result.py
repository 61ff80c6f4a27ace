"""Validation Result Types"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class ErrorKind(str, Enum):
    """Failure categories surfaced to the caller"""

    INVALID_STREAM_NAME = "InvalidStreamName"
    DATA_TOO_LARGE = "DataTooLarge"
    REMOTE_SUBMISSION_ERROR = "RemoteSubmissionError"
    MISSING_REQUIRED_INPUT = "MissingRequiredInput"


@dataclass(frozen=True)
class Ok:
    """成功値"""

    value: Any = None

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False


@dataclass(frozen=True)
class Err:
    """
    失敗値

    例外を送出する代わりに、失敗の種類とメッセージを値として返す。
    """

    kind: ErrorKind
    message: str

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.message


Result = Union[Ok, Err]

"""Submission Value Objects"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..result import ErrorKind
from ..validation import (
    MAX_RECORD_SIZE_BYTES,
    MAX_STREAM_NAME_LENGTH,
    STREAM_NAME_PATTERN,
)


@dataclass(frozen=True)
class SubmissionRequest:
    """
    送信リクエスト（値オブジェクト）

    1 回の呼び出しごとに生成され、送信後に破棄される。
    """

    stream_name: str
    payload: bytes

    def __post_init__(self) -> None:
        """バリデーション"""
        self._validate()

    def _validate(self) -> None:
        """値の妥当性を検証"""
        if not 1 <= len(self.stream_name) <= MAX_STREAM_NAME_LENGTH:
            raise ValueError(
                f"Stream name must be 1-{MAX_STREAM_NAME_LENGTH} characters "
                f"(got {len(self.stream_name)})"
            )

        if not STREAM_NAME_PATTERN.fullmatch(self.stream_name):
            raise ValueError(f"Invalid stream name: {self.stream_name!r}")

        if len(self.payload) > MAX_RECORD_SIZE_BYTES:
            raise ValueError(
                f"Payload too large: {len(self.payload)} bytes "
                f"(max {MAX_RECORD_SIZE_BYTES})"
            )

    @property
    def size_bytes(self) -> int:
        return len(self.payload)


@dataclass(frozen=True)
class SubmissionResult:
    """
    送信結果（値オブジェクト）

    success のときのみ record_id を持ち、失敗のときのみ error を持つ。
    record_id は成功時でも省略されうる。
    """

    success: bool
    record_id: str | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None

    def __post_init__(self) -> None:
        if self.success:
            if self.error is not None or self.error_kind is not None:
                raise ValueError("Successful result cannot carry an error")
        else:
            if self.record_id is not None:
                raise ValueError("Failed result cannot carry a record id")
            if not self.error or self.error_kind is None:
                raise ValueError("Failed result requires an error kind and message")

    @classmethod
    def succeeded(cls, record_id: str | None = None) -> SubmissionResult:
        return cls(success=True, record_id=record_id)

    @classmethod
    def failed(cls, kind: ErrorKind, message: str) -> SubmissionResult:
        return cls(success=False, error=message, error_kind=kind)

    def to_dict(self) -> dict[str, Any]:
        """辞書に変換"""
        return {
            "success": self.success,
            "record_id": self.record_id,
            "error": self.error,
            "error_kind": self.error_kind.value if self.error_kind else None,
        }

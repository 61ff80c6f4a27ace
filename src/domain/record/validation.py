"""Record Validation

Firehose に送信する前にストリーム名とデータサイズを検証する。
ネットワーク呼び出しの前に不正なリクエストを弾くための純粋関数群。
"""
from __future__ import annotations

import re

from .result import Err, ErrorKind, Ok, Result

MAX_STREAM_NAME_LENGTH = 64
MAX_RECORD_SIZE_BYTES = 1000 * 1024  # 1000 KB

STREAM_NAME_PATTERN = re.compile(r"[A-Za-z0-9_.-]+")


def payload_bytes(data: str) -> bytes:
    """
    データを UTF-8 バイト列に変換

    対になったサロゲートは1文字に結合し、対のないサロゲートは U+FFFD に置き換える。
    どんな文字列でも例外を送出しない。
    """
    text = data.encode("utf-16-le", errors="surrogatepass").decode("utf-16-le", errors="replace")
    return text.encode("utf-8")


def validate_stream_name(stream_name: str) -> Result:
    """ストリーム名を検証"""
    if not stream_name or not stream_name.strip():
        return Err(ErrorKind.INVALID_STREAM_NAME, "Stream name cannot be empty")

    if len(stream_name) > MAX_STREAM_NAME_LENGTH:
        return Err(
            ErrorKind.INVALID_STREAM_NAME,
            f"Stream name exceeds maximum length of {MAX_STREAM_NAME_LENGTH} characters "
            f"(got {len(stream_name)})",
        )

    if not STREAM_NAME_PATTERN.fullmatch(stream_name):
        return Err(
            ErrorKind.INVALID_STREAM_NAME,
            f'Stream name "{stream_name}" contains invalid characters. '
            "Only alphanumeric characters, hyphens, underscores, and periods are allowed.",
        )

    return Ok()


def validate_data(data: str) -> Result:
    """データサイズを検証（最大 1000 KB）"""
    size_bytes = len(payload_bytes(data))

    if size_bytes > MAX_RECORD_SIZE_BYTES:
        return Err(
            ErrorKind.DATA_TOO_LARGE,
            f"Data size ({size_bytes} bytes) exceeds maximum allowed size "
            f"({MAX_RECORD_SIZE_BYTES} bytes / 1000 KB)",
        )

    return Ok(size_bytes)

"""Send Record Use Case Unit Tests"""
from __future__ import annotations

import pytest

from src.application.ports.action_context import IActionContext, LogLevel
from src.application.ports.delivery_stream import (
    IDeliveryStreamGateway,
    RemoteSubmissionError,
)
from src.application.use_cases.record import (
    SendRecordInput,
    SendRecordUseCase,
    send_record,
)
from src.domain.record import ErrorKind


class StubDeliveryStream(IDeliveryStreamGateway):
    """送信内容を記録するスタブ"""

    def __init__(self, record_id: str | None = None, error: Exception | None = None):
        self.record_id = record_id
        self.error = error
        self.calls: list[tuple[str, bytes]] = []

    async def submit(self, stream_name: str, data: bytes) -> str | None:
        self.calls.append((stream_name, data))
        if self.error is not None:
            raise self.error
        return self.record_id


class TestSendRecordSuccess:
    """送信成功のテスト"""

    @pytest.mark.anyio
    async def test_returns_record_id(self):
        """正常: レコードIDを返す"""
        gateway = StubDeliveryStream(record_id="abc")

        result = await send_record(gateway, SendRecordInput(stream_name="events", data="hello"))

        assert result.success is True
        assert result.record_id == "abc"
        assert result.error is None

    @pytest.mark.anyio
    async def test_missing_record_id_is_success(self):
        """正常: レコードIDがなくても成功"""
        gateway = StubDeliveryStream(record_id=None)

        result = await send_record(gateway, SendRecordInput(stream_name="events", data="hello"))

        assert result.success is True
        assert result.record_id is None

    @pytest.mark.anyio
    async def test_submits_utf8_bytes_once(self):
        """正常: UTF-8 バイト列で 1 回だけ送信"""
        gateway = StubDeliveryStream(record_id="abc")

        await SendRecordUseCase(gateway).execute(
            SendRecordInput(stream_name="my.stream_1", data="日本語")
        )

        assert gateway.calls == [("my.stream_1", "日本語".encode("utf-8"))]


class TestSendRecordValidation:
    """送信前検証のテスト"""

    @pytest.mark.anyio
    async def test_invalid_stream_name_never_calls_gateway(self):
        """異常: 不正なストリーム名では送信しない"""
        gateway = StubDeliveryStream(record_id="abc")

        result = await send_record(gateway, SendRecordInput(stream_name="bad name!", data="x"))

        assert result.success is False
        assert "Stream name" in result.error
        assert result.error_kind == ErrorKind.INVALID_STREAM_NAME
        assert result.record_id is None
        assert gateway.calls == []

    @pytest.mark.anyio
    async def test_data_too_large_never_calls_gateway(self):
        """異常: データサイズ超過では送信しない"""
        gateway = StubDeliveryStream(record_id="abc")

        result = await send_record(
            gateway,
            SendRecordInput(stream_name="events", data="x" * 1_024_001),
        )

        assert result.success is False
        assert result.error_kind == ErrorKind.DATA_TOO_LARGE
        assert gateway.calls == []

    @pytest.mark.anyio
    async def test_stream_name_checked_first(self):
        """異常: 両方不正ならストリーム名エラーを返す"""
        gateway = StubDeliveryStream()

        result = await send_record(
            gateway,
            SendRecordInput(stream_name="", data="x" * 1_024_001),
        )

        assert result.error == "Stream name cannot be empty"


class TestSendRecordRemoteFailure:
    """送信失敗のテスト"""

    @pytest.mark.anyio
    async def test_error_message_passed_through_without_retry(self):
        """異常: 例外メッセージをそのまま返し、リトライしない"""
        gateway = StubDeliveryStream(error=Exception("throttled"))

        result = await send_record(gateway, SendRecordInput(stream_name="events", data="hello"))

        assert result.success is False
        assert result.error == "throttled"
        assert result.error_kind == ErrorKind.REMOTE_SUBMISSION_ERROR
        assert len(gateway.calls) == 1

    @pytest.mark.anyio
    async def test_remote_submission_error(self):
        """異常: RemoteSubmissionError のメッセージを返す"""
        gateway = StubDeliveryStream(error=RemoteSubmissionError("AccessDenied"))

        result = await send_record(gateway, SendRecordInput(stream_name="events", data="hello"))

        assert result.error == "AccessDenied"

    @pytest.mark.anyio
    async def test_empty_error_message_falls_back_to_type(self):
        """異常: メッセージが空なら例外名を返す"""
        gateway = StubDeliveryStream(error=TimeoutError())

        result = await send_record(gateway, SendRecordInput(stream_name="events", data="hello"))

        assert result.success is False
        assert result.error == "TimeoutError"


class RecordingContext(IActionContext):
    """log の呼び出しだけを記録するコンテキスト"""

    def __init__(self):
        self.messages: list[tuple[LogLevel, str]] = []

    def get_input(self, name: str, required: bool = False) -> str:
        return ""

    def set_output(self, name: str, value: str) -> None:
        pass

    def log(self, level: LogLevel, message: str) -> None:
        self.messages.append((level, message))

    def set_failed(self, message: str) -> None:
        pass


class TestSendRecordEncoding:
    """UTF-8 変換のテスト"""

    @pytest.mark.anyio
    async def test_lone_surrogate_is_sent_as_replacement_character(self):
        """正常: 対のないサロゲートを含むデータでも例外にならず送信する"""
        gateway = StubDeliveryStream(record_id="abc")

        result = await send_record(gateway, SendRecordInput(stream_name="events", data="a\ud800b"))

        assert result.success is True
        assert gateway.calls == [("events", b"a\xef\xbf\xbdb")]


class TestSendRecordReporting:
    """ホスト環境への出力のテスト"""

    @pytest.mark.anyio
    async def test_reports_progress(self):
        """正常: 送信先・サイズ・レコードIDを出力"""
        context = RecordingContext()

        await send_record(
            StubDeliveryStream(record_id="abc"),
            SendRecordInput(stream_name="events", data="テスト"),
            context,
        )

        assert context.messages == [
            (LogLevel.INFO, "Sending record to stream: events"),
            (LogLevel.INFO, "Data size: 9 bytes"),
            (LogLevel.INFO, "✓ Record sent successfully"),
            (LogLevel.INFO, "Record ID: abc"),
        ]

    @pytest.mark.anyio
    async def test_reports_remote_failure(self):
        """異常: 送信失敗をエラーとして出力"""
        context = RecordingContext()

        await send_record(
            StubDeliveryStream(error=Exception("throttled")),
            SendRecordInput(stream_name="events", data="hello"),
            context,
        )

        assert context.messages[-1] == (LogLevel.ERROR, "Failed to send record: throttled")

    @pytest.mark.anyio
    async def test_reports_validation_failure(self):
        """異常: 検証失敗をエラーとして出力"""
        context = RecordingContext()

        await send_record(
            StubDeliveryStream(),
            SendRecordInput(stream_name="", data="hello"),
            context,
        )

        assert context.messages == [
            (LogLevel.ERROR, "Failed to send record: Stream name cannot be empty"),
        ]

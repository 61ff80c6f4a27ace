"""Send Record Use Case"""
from __future__ import annotations

from dataclasses import dataclass

import structlog

from src.application.ports.action_context import IActionContext, LogLevel
from src.application.ports.delivery_stream import IDeliveryStreamGateway
from src.domain.record import (
    Err,
    ErrorKind,
    SubmissionRequest,
    SubmissionResult,
    payload_bytes,
    validate_data,
    validate_stream_name,
)

logger = structlog.get_logger()


@dataclass(frozen=True)
class SendRecordInput:
    """送信入力DTO"""

    stream_name: str
    data: str


class SendRecordUseCase:
    """
    レコード送信 ユースケース

    1. ストリーム名とデータサイズを検証
    2. SubmissionRequest を作成
    3. Delivery Stream に 1 回だけ送信（リトライなし）
    4. 結果を SubmissionResult に正規化

    失敗はすべて SubmissionResult として返し、例外は外に出さない。
    context が渡された場合は進捗と失敗をホスト環境にも出力する。
    """

    def __init__(
        self,
        delivery_stream: IDeliveryStreamGateway,
        context: IActionContext | None = None,
    ):
        self._delivery_stream = delivery_stream
        self._context = context

    async def execute(self, input_data: SendRecordInput) -> SubmissionResult:
        """ユースケースを実行"""
        log = logger.bind(stream_name=input_data.stream_name)

        for check in (
            validate_stream_name(input_data.stream_name),
            validate_data(input_data.data),
        ):
            if isinstance(check, Err):
                log.error("send_record_rejected", kind=check.kind.value, error=check.message)
                self._report(LogLevel.ERROR, f"Failed to send record: {check.message}")
                return SubmissionResult.failed(check.kind, check.message)

        request = SubmissionRequest(
            stream_name=input_data.stream_name,
            payload=payload_bytes(input_data.data),
        )
        log.info("send_record_started", size_bytes=request.size_bytes)
        self._report(LogLevel.INFO, f"Sending record to stream: {request.stream_name}")
        self._report(LogLevel.INFO, f"Data size: {request.size_bytes} bytes")

        try:
            record_id = await self._delivery_stream.submit(
                request.stream_name,
                request.payload,
            )
        except Exception as e:
            message = _error_message(e)
            log.error("send_record_failed", error=message)
            self._report(LogLevel.ERROR, f"Failed to send record: {message}")
            return SubmissionResult.failed(ErrorKind.REMOTE_SUBMISSION_ERROR, message)

        log.info("send_record_completed", record_id=record_id)
        self._report(LogLevel.INFO, "✓ Record sent successfully")
        if record_id:
            self._report(LogLevel.INFO, f"Record ID: {record_id}")

        return SubmissionResult.succeeded(record_id)

    def _report(self, level: LogLevel, message: str) -> None:
        if self._context is not None:
            self._context.log(level, message)


async def send_record(
    delivery_stream: IDeliveryStreamGateway,
    config: SendRecordInput,
    context: IActionContext | None = None,
) -> SubmissionResult:
    """Delivery Stream にレコードを 1 件送信"""
    return await SendRecordUseCase(delivery_stream, context).execute(config)


def _error_message(error: BaseException) -> str:
    return str(error) or type(error).__name__

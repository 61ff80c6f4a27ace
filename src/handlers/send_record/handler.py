"""
Firehose Send Record Handler

GitHub Actions のステップとして実行されるエントリポイント:
- 入力 stream-name / data を取得
- Firehose にレコードを 1 件送信
- 出力 record-id を設定、失敗時はステップを失敗させる
"""
from __future__ import annotations

import asyncio
import sys
from typing import Callable, Optional

import structlog

from src.application.ports.action_context import IActionContext, LogLevel
from src.application.ports.delivery_stream import IDeliveryStreamGateway
from src.application.use_cases.record import SendRecordInput, send_record
from src.infrastructure.actions import GitHubActionsContext
from src.infrastructure.config import Settings, get_settings
from src.infrastructure.gateways.firehose import FirehoseGateway
from src.infrastructure.logging import configure_logging

logger = structlog.get_logger()

STREAM_NAME_INPUT = "stream-name"
DATA_INPUT = "data"
RECORD_ID_OUTPUT = "record-id"

GatewayFactory = Callable[[Settings], IDeliveryStreamGateway]


class RecordDeliveryError(Exception):
    """レコード送信失敗エラー"""

    pass


def run(
    context: IActionContext,
    gateway_factory: Optional[GatewayFactory] = None,
    settings: Optional[Settings] = None,
) -> int:
    """ステップを実行し、終了コードを返す"""
    try:
        stream_name = context.get_input(STREAM_NAME_INPUT, required=True)
        data = context.get_input(DATA_INPUT, required=True)

        context.log(LogLevel.INFO, "AWS Firehose Send Message")
        context.log(LogLevel.INFO, f"Stream Name: {stream_name}")

        settings = settings or get_settings()
        factory = gateway_factory or FirehoseGateway.from_settings
        gateway = factory(settings)

        result = asyncio.run(
            send_record(
                gateway,
                SendRecordInput(stream_name=stream_name, data=data),
                context,
            )
        )

        if not result.success:
            raise RecordDeliveryError(result.error or "Failed to send record")

        if result.record_id:
            context.set_output(RECORD_ID_OUTPUT, result.record_id)

        _log_summary(context, result.record_id)
        return 0

    except Exception as e:
        logger.error("handler_failed", error=str(e), error_type=type(e).__name__)
        context.set_failed(str(e) or type(e).__name__)
        return 1


def _log_summary(context: IActionContext, record_id: str | None) -> None:
    context.log(LogLevel.INFO, "")
    context.log(LogLevel.INFO, "=" * 50)
    context.log(LogLevel.INFO, "Record sent successfully")
    if record_id:
        context.log(LogLevel.INFO, f"Record ID: {record_id}")
    context.log(LogLevel.INFO, "=" * 50)


def main() -> None:
    """コンソールスクリプトのエントリポイント"""
    settings = get_settings()
    configure_logging(settings.log_level)
    sys.exit(run(GitHubActionsContext(), settings=settings))

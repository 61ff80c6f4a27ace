"""Firehose Gateway Implementation"""
from __future__ import annotations

from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError
import structlog

from src.application.ports.delivery_stream import (
    IDeliveryStreamGateway,
    RemoteSubmissionError,
)
from src.infrastructure.config import Settings

logger = structlog.get_logger()


class FirehoseGateway(IDeliveryStreamGateway):
    """
    Firehose Gateway

    Amazon Data Firehose の Delivery Stream にレコードを送信する。
    認証情報は環境（環境変数・プロファイル・ロール）から解決される。
    """

    def __init__(
        self,
        region: str | None = None,
        endpoint_url: str | None = None,
        client: Any = None,
    ):
        self.region = region
        self.endpoint_url = endpoint_url
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> FirehoseGateway:
        return cls(region=settings.aws_region, endpoint_url=settings.endpoint_url)

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = boto3.client(
                "firehose",
                region_name=self.region,
                endpoint_url=self.endpoint_url,
            )
        return self._client

    async def submit(self, stream_name: str, data: bytes) -> str | None:
        """
        レコードを送信

        Args:
            stream_name: Delivery Stream 名
            data: レコードデータ

        Returns:
            str | None: RecordId
        """
        log = logger.bind(stream_name=stream_name)
        log.info("put_record_started", size=len(data))

        try:
            response = self.client.put_record(
                DeliveryStreamName=stream_name,
                Record={"Data": data},
            )
        except (ClientError, BotoCoreError) as e:
            log.error("put_record_failed", error=str(e))
            raise RemoteSubmissionError(str(e)) from e

        record_id = response.get("RecordId")
        log.info("put_record_completed", record_id=record_id)
        return record_id

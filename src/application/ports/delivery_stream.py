"""Delivery Stream Gateway Interface (Port)"""
from __future__ import annotations

from abc import ABC, abstractmethod


class RemoteSubmissionError(Exception):
    """ストリーミング取り込みサービスへの送信エラー"""

    pass


class IDeliveryStreamGateway(ABC):
    """
    Delivery Stream Gateway Interface

    Firehose などのストリーミング取り込みサービスとの通信を抽象化する。
    テストでは決定的なスタブに差し替える。
    """

    @abstractmethod
    async def submit(self, stream_name: str, data: bytes) -> str | None:
        """
        レコードを 1 件送信

        Returns:
            str | None: レコードID（サービスが返さない場合は None）

        Raises:
            RemoteSubmissionError: 送信に失敗した場合
        """
        pass

"""Action Context Interface (Port)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class MissingRequiredInputError(Exception):
    """必須入力が指定されていないエラー"""

    pass


class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class IActionContext(ABC):
    """
    Action Context Interface

    自動化プラットフォームの入出力・ログ・失敗通知を抽象化する。
    コア（検証と送信）はホスト環境なしでテストできる。
    """

    @abstractmethod
    def get_input(self, name: str, required: bool = False) -> str:
        """
        名前付き入力を取得

        Raises:
            MissingRequiredInputError: required で値が空の場合
        """
        pass

    @abstractmethod
    def set_output(self, name: str, value: str) -> None:
        """名前付き出力を設定"""
        pass

    @abstractmethod
    def log(self, level: LogLevel, message: str) -> None:
        """ホスト環境にメッセージを出力"""
        pass

    @abstractmethod
    def set_failed(self, message: str) -> None:
        """プロセスを失敗としてマーク"""
        pass

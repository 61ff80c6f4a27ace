"""Application Settings"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    アプリケーション設定

    12-Factor App の Config 原則に従い、
    すべての設定は環境変数から取得する。
    認証情報は boto3 の標準チェーンに任せ、ここでは扱わない。
    """

    model_config = SettingsConfigDict(
        env_prefix="FIREHOSE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Service
    service_name: str = "firehose-send-record"
    environment: str = "production"
    log_level: str = "INFO"

    # AWS
    aws_region: Optional[str] = None
    endpoint_url: Optional[str] = None

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache()
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得"""
    return Settings()

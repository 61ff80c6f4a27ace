import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """テストごとに structlog の設定を戻す"""
    yield
    structlog.reset_defaults()

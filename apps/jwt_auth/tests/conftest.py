"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

import logging
import os
from typing import Generator

import pytest

from apps.jwt_auth.infrastructure.security.config import TokenManagerConfig
from apps.jwt_auth.infrastructure.security.token_manager import TokenManager

TEST_SECRET = "test-secret-32-bytes-minimum...."
ACCESS_LIFETIME_MILLIS = 900_000  # 15분
REFRESH_LIFETIME_MILLIS = 604_800_000  # 7일
FIXED_NOW_MILLIS = 1_700_000_000_123


# ============================================================
# Environment
# ============================================================


@pytest.fixture(scope="session", autouse=True)
def _test_env() -> Generator[None, None, None]:
    """Set test environment variables."""
    original = os.environ.copy()
    os.environ.update(
        {
            "JWT_TOKEN_SECRET": "test-secret-key-for-testing-only-0123456789",
            "ENVIRONMENT": "test",
        }
    )
    yield
    os.environ.clear()
    os.environ.update(original)


@pytest.fixture(autouse=True)
def _clear_caches() -> Generator[None, None, None]:
    """lru_cache로 고정된 설정/매니저 초기화."""
    from apps.jwt_auth.setup.config import get_settings
    from apps.jwt_auth.setup.dependencies import get_token_manager

    get_settings.cache_clear()
    get_token_manager.cache_clear()
    yield
    get_settings.cache_clear()
    get_token_manager.cache_clear()


@pytest.fixture(autouse=True)
def _restore_log_record_factory() -> Generator[None, None, None]:
    """create_app()이 설치한 전역 레코드 팩토리가 다른 테스트로 새지 않도록 복원."""
    original = logging.getLogRecordFactory()
    yield
    logging.setLogRecordFactory(original)


# ============================================================
# Clock
# ============================================================


class FakeClock:
    """수동으로 진행시키는 epoch milliseconds 시계."""

    def __init__(self, now: int, step: int = 0) -> None:
        self.now = now
        self.step = step
        self.calls = 0

    def __call__(self) -> int:
        current = self.now
        self.now += self.step
        self.calls += 1
        return current

    def advance(self, millis: int) -> None:
        self.now += millis

    def set(self, millis: int) -> None:
        self.now = millis


@pytest.fixture
def clock() -> FakeClock:
    """고정 시각에서 시작하는 시계."""
    return FakeClock(FIXED_NOW_MILLIS)


# ============================================================
# Token Fixtures
# ============================================================


@pytest.fixture
def token_config() -> TokenManagerConfig:
    """테스트용 TokenManagerConfig."""
    return TokenManagerConfig.create(
        access_token_lifetime_millis=ACCESS_LIFETIME_MILLIS,
        refresh_token_lifetime_millis=REFRESH_LIFETIME_MILLIS,
        signing_secret=TEST_SECRET,
    )


@pytest.fixture
def token_manager(token_config: TokenManagerConfig, clock: FakeClock) -> TokenManager:
    """FakeClock을 사용하는 TokenManager."""
    return TokenManager(token_config, clock=clock)

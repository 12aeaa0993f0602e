"""Logging 테스트."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import ecs_logging

from apps.jwt_auth.setup.config import get_settings

SECRET = "test-secret-32-bytes-minimum...."


class TestSetupLogging:
    """setup_logging 함수 테스트."""

    def setup_method(self) -> None:
        """테스트 전 설정."""
        get_settings.cache_clear()
        self._record_factory = logging.getLogRecordFactory()

    def teardown_method(self) -> None:
        """테스트 후 정리."""
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.setLevel(logging.WARNING)
        logging.setLogRecordFactory(self._record_factory)
        get_settings.cache_clear()

    def test_setup_logging_configures_root_logger(self) -> None:
        """루트 로거 설정 확인."""
        env_vars = {"JWT_TOKEN_SECRET": SECRET, "LOG_LEVEL": "DEBUG"}

        with patch.dict(os.environ, env_vars, clear=True):
            from apps.jwt_auth.setup.logging import setup_logging

            setup_logging()

            root_logger = logging.getLogger()
            assert root_logger.level == logging.DEBUG
            assert len(root_logger.handlers) == 1
            assert isinstance(root_logger.handlers[0].formatter, ecs_logging.StdlibFormatter)

    def test_explicit_level_overrides_settings(self) -> None:
        with patch.dict(os.environ, {"JWT_TOKEN_SECRET": SECRET}, clear=True):
            from apps.jwt_auth.setup.logging import setup_logging

            setup_logging("warning")

            assert logging.getLogger().level == logging.WARNING

    def test_setup_logging_adds_service_metadata(self) -> None:
        """서비스 메타데이터 추가 확인."""
        env_vars = {
            "JWT_TOKEN_SECRET": SECRET,
            "SERVICE_NAME": "test-jwt-auth",
            "JWT_SERVICE_VERSION": "1.2.3",
            "ENVIRONMENT": "test",
        }

        with patch.dict(os.environ, env_vars, clear=True):
            from apps.jwt_auth.setup.logging import setup_logging

            setup_logging()

            record = logging.getLogRecordFactory()(
                "test", logging.INFO, __file__, 1, "message", (), None
            )

        assert record.service == {
            "name": "test-jwt-auth",
            "version": "1.2.3",
            "environment": "test",
        }

    def test_repeated_setup_does_not_stack_factories(self) -> None:
        """재호출 시 팩토리를 다시 감싸지 않고 최신 설정을 반영한다."""
        # Arrange
        from apps.jwt_auth.setup.logging import setup_logging

        original = logging.getLogRecordFactory()

        # Act
        with patch.dict(
            os.environ, {"JWT_TOKEN_SECRET": SECRET, "ENVIRONMENT": "first"}, clear=True
        ):
            setup_logging()
        get_settings.cache_clear()
        with patch.dict(
            os.environ, {"JWT_TOKEN_SECRET": SECRET, "ENVIRONMENT": "second"}, clear=True
        ):
            setup_logging()
            setup_logging()

        # Assert
        factory = logging.getLogRecordFactory()
        assert factory._jwt_auth_base_factory is original
        assert len(logging.getLogger().handlers) == 1
        record = factory("test", logging.INFO, __file__, 1, "message", (), None)
        assert record.service["environment"] == "second"

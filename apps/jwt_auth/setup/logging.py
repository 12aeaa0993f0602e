"""Logging Configuration.

stdout으로 ECS JSON 로그를 내보내고, 모든 레코드에 서비스 메타데이터를 붙입니다.
여러 번 호출해도 핸들러와 레코드 팩토리가 중첩되지 않습니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable

import ecs_logging

from apps.jwt_auth.setup.config import Settings, get_settings

RecordFactory = Callable[..., logging.LogRecord]

# 우리가 설치한 팩토리가 감싼 원래 팩토리를 가리키는 속성
_BASE_FACTORY_ATTR = "_jwt_auth_base_factory"

QUIET_LOGGERS = ("uvicorn.access",)


def _service_metadata(settings: Settings) -> dict[str, str]:
    return {
        "name": settings.service_name,
        "version": settings.service_version,
        "environment": settings.environment,
    }


def _install_record_factory(service: dict[str, str]) -> None:
    current = logging.getLogRecordFactory()
    base: RecordFactory = getattr(current, _BASE_FACTORY_ATTR, current)

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = base(*args, **kwargs)
        record.service = service
        return record

    setattr(record_factory, _BASE_FACTORY_ATTR, base)
    logging.setLogRecordFactory(record_factory)


def setup_logging(level: str | None = None) -> None:
    """로깅 설정.

    Args:
        level: 로그 레벨. 없으면 설정의 LOG_LEVEL을 사용
    """
    settings = get_settings()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ecs_logging.StdlibFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel((level or settings.log_level).upper())

    _install_record_factory(_service_metadata(settings))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

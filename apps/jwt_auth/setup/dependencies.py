"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
"""

from __future__ import annotations

from functools import lru_cache

from apps.jwt_auth.application.token.ports import TokenIssuer
from apps.jwt_auth.infrastructure.security.token_manager import TokenManager
from apps.jwt_auth.setup.config import get_settings


@lru_cache
def get_token_manager() -> TokenIssuer:
    """TokenIssuer 제공자.

    TokenManager는 불변이므로 프로세스 단위로 하나만 생성합니다.
    """
    return TokenManager(get_settings().to_token_config())

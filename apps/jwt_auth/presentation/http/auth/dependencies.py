"""Auth Dependencies.

FastAPI Depends용 인증 의존성입니다.
Authorization 헤더에서 Bearer 토큰을 꺼내 TokenIssuer로 검증합니다.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header

from apps.jwt_auth.application.token.ports import TokenIssuer
from apps.jwt_auth.domain.enums.grant_type import GrantType
from apps.jwt_auth.domain.exceptions.auth import InvalidTokenError
from apps.jwt_auth.domain.value_objects.token_claims import TokenClaims
from apps.jwt_auth.setup.dependencies import get_token_manager


def parse_bearer(header_value: Optional[str]) -> Optional[str]:
    """Bearer 토큰에서 실제 토큰 값을 추출합니다."""
    if not header_value:
        return None
    scheme, _, token = header_value.partition(" ")
    if scheme.upper() != GrantType.BEARER.value or not token.strip():
        return None
    return token.strip()


def get_bearer_token(
    authorization: Optional[str] = Header(None, alias="Authorization"),
) -> str:
    """Authorization 헤더의 Bearer 토큰.

    Raises:
        InvalidTokenError: 헤더 없음/형식 오류
    """
    token = parse_bearer(authorization)
    if token is None:
        raise InvalidTokenError("Bearer token is required")
    return token


def get_token_claims(
    token: str = Depends(get_bearer_token),
    token_manager: TokenIssuer = Depends(get_token_manager),
) -> TokenClaims:
    """검증된 토큰의 클레임.

    Raises:
        InvalidTokenError: 유효하지 않은 토큰
        TokenExpiredError: 만료된 토큰
    """
    token_manager.validate(token)
    return token_manager.extract_claims(token)

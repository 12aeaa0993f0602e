"""Token Exceptions.

토큰 검증 실패는 두 종류(TokenErrorKind)로만 분류됩니다.
호출자는 예외 타입 대신 ``exc.kind``로 분기할 수 있습니다.
"""

from __future__ import annotations

from enum import Enum

from apps.jwt_auth.domain.exceptions.base import DomainError


class TokenErrorKind(str, Enum):
    """토큰 검증 실패 종류."""

    EXPIRED = "TOKEN_EXPIRED"
    """서명은 유효하지만 만료됨. 리프레시 토큰으로 재발급 가능."""

    INVALID = "NOT_VALID_TOKEN"
    """위조/변조/형식 오류. 재인증 필요."""


class TokenError(DomainError):
    """토큰 검증 실패 베이스."""

    kind: TokenErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)


class TokenExpiredError(TokenError):
    """만료된 토큰."""

    kind = TokenErrorKind.EXPIRED

    def __init__(self, message: str = "Token has expired") -> None:
        super().__init__(message)


class InvalidTokenError(TokenError):
    """유효하지 않은 토큰."""

    kind = TokenErrorKind.INVALID

    def __init__(self, reason: str = "Invalid token") -> None:
        super().__init__(reason)

"""TokenIssuer Port.

JWT 토큰 발급/검증을 위한 Gateway 인터페이스입니다.
"""

from __future__ import annotations

from typing import Protocol

from apps.jwt_auth.application.token.dto import TokenPair
from apps.jwt_auth.domain.enums.role import Role
from apps.jwt_auth.domain.value_objects.member_id import MemberId, RawMemberId
from apps.jwt_auth.domain.value_objects.token_claims import TokenClaims


class TokenIssuer(Protocol):
    """토큰 발급자 인터페이스.

    구현체:
        - TokenManager (infrastructure/security/)
    """

    def issue(self, member_id: MemberId | RawMemberId, role: Role | str) -> TokenPair:
        """액세스/리프레시 토큰 쌍 발급.

        Args:
            member_id: 회원 ID
            role: 회원 역할

        Returns:
            토큰 쌍
        """
        ...

    def validate(self, token: str) -> None:
        """토큰 서명과 만료를 검증합니다.

        Raises:
            InvalidTokenError: 위조/변조/형식 오류
            TokenExpiredError: 만료된 토큰
        """
        ...

    def extract_claims(self, token: str) -> TokenClaims:
        """서명 검증 후 클레임을 반환합니다. 만료 여부는 보지 않습니다.

        Raises:
            InvalidTokenError: 위조/변조/형식 오류
        """
        ...

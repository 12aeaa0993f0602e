"""TokenClaims Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from apps.jwt_auth.domain.enums.role import Role
from apps.jwt_auth.domain.enums.token_type import TokenType
from apps.jwt_auth.domain.value_objects.member_id import MemberId


@dataclass(frozen=True, slots=True)
class TokenClaims:
    """디코딩된 토큰 클레임.

    시각은 모두 epoch milliseconds 입니다.
    리프레시 토큰은 role이 None 입니다.
    """

    subject: TokenType
    issued_at: int
    expiration: int
    member_id: MemberId
    role: Role | None = None

    @property
    def lifetime_millis(self) -> int:
        return self.expiration - self.issued_at

    def is_expired_at(self, now_millis: int) -> bool:
        """만료 시각 당일(같은 밀리초)부터 만료로 본다."""
        return now_millis >= self.expiration

    def is_issued_after(self, now_millis: int) -> bool:
        """발급 시각이 now보다 미래인지 확인."""
        return now_millis < self.issued_at

"""Token DTOs."""

from dataclasses import dataclass

from apps.jwt_auth.domain.enums.grant_type import GrantType


@dataclass(frozen=True, slots=True)
class TokenPair:
    """토큰 쌍 발급 결과.

    만료 시각은 epoch milliseconds 입니다.
    발급자는 이 값을 저장하지 않으며, 전달(헤더/쿠키)은 호출자 책임입니다.
    """

    access_token: str
    refresh_token: str
    access_token_expire_time: int
    refresh_token_expire_time: int
    grant_type: str = GrantType.BEARER.value

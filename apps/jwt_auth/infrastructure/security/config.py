"""TokenManager Configuration.

TokenManager 생성 시 주입되는 불변 설정 값입니다.
환경변수 로딩은 setup/config/settings.py에서 수행하며,
코어 로직은 전역 설정을 직접 조회하지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from apps.jwt_auth.application.common.exceptions import TokenConfigError

# HS512 서명 알고리즘 (고정)
SIGNING_ALGORITHM = "HS512"

MIN_SECRET_BYTES = 32


@dataclass(frozen=True, slots=True)
class TokenManagerConfig:
    """토큰 매니저 설정.

    Attributes:
        access_token_lifetime_millis: 액세스 토큰 유효 기간 (ms)
        refresh_token_lifetime_millis: 리프레시 토큰 유효 기간 (ms)
        signing_secret: HMAC 서명 키 (최소 32 bytes)
    """

    access_token_lifetime_millis: int
    refresh_token_lifetime_millis: int
    signing_secret: bytes = field(repr=False)

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        for name in ("access_token_lifetime_millis", "refresh_token_lifetime_millis"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TokenConfigError(f"{name} must be an integer")
            if value <= 0:
                raise TokenConfigError(f"{name} must be positive")
        if not isinstance(self.signing_secret, bytes):
            raise TokenConfigError("signing_secret must be bytes")
        if len(self.signing_secret) < MIN_SECRET_BYTES:
            raise TokenConfigError(
                f"signing_secret must be at least {MIN_SECRET_BYTES} bytes"
            )

    @property
    def algorithm(self) -> str:
        return SIGNING_ALGORITHM

    @classmethod
    def create(
        cls,
        *,
        access_token_lifetime_millis: int,
        refresh_token_lifetime_millis: int,
        signing_secret: str | bytes,
    ) -> "TokenManagerConfig":
        """문자열 secret을 UTF-8로 인코딩해 설정 생성."""
        if isinstance(signing_secret, str):
            signing_secret = signing_secret.encode("utf-8")
        return cls(
            access_token_lifetime_millis=access_token_lifetime_millis,
            refresh_token_lifetime_millis=refresh_token_lifetime_millis,
            signing_secret=signing_secret,
        )

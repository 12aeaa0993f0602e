"""Configuration Exceptions."""

from apps.jwt_auth.application.common.exceptions.base import ApplicationError


class TokenConfigError(ApplicationError):
    """토큰 매니저 설정 오류.

    생성 시점에만 발생합니다. 발급/검증 호출마다 발생하지 않습니다.
    """

    def __init__(self, reason: str = "Invalid token configuration") -> None:
        super().__init__(reason)

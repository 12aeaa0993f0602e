"""Error Translators.

도메인 예외를 HTTP 상태 코드로 변환합니다.
"""

from apps.jwt_auth.domain.exceptions.auth import TokenError, TokenErrorKind
from apps.jwt_auth.domain.exceptions.base import DomainError
from apps.jwt_auth.domain.exceptions.validation import ValidationError

_TOKEN_ERROR_STATUS: dict[TokenErrorKind, int] = {
    TokenErrorKind.EXPIRED: 401,
    TokenErrorKind.INVALID: 401,
}


def translate_domain_error(exc: DomainError) -> tuple[int, str]:
    """도메인 예외를 (status_code, code) 튜플로 변환.

    Returns:
        (HTTP 상태 코드, 에러 코드)
    """
    if isinstance(exc, TokenError):
        return _TOKEN_ERROR_STATUS[exc.kind], exc.kind.value
    if isinstance(exc, ValidationError):
        return 400, "INVALID_INPUT"
    return 400, "DOMAIN_ERROR"

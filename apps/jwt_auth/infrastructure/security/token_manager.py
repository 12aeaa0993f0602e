"""JWT Token Manager.

TokenIssuer 포트의 구현체입니다.
HS512로 서명한 액세스/리프레시 토큰을 발급하고 검증합니다.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from jose import jwt
from jose.exceptions import JOSEError

from apps.jwt_auth.application.token.dto import TokenPair
from apps.jwt_auth.domain.enums.grant_type import GrantType
from apps.jwt_auth.domain.enums.role import Role
from apps.jwt_auth.domain.enums.token_type import TokenType
from apps.jwt_auth.domain.exceptions.auth import InvalidTokenError, TokenExpiredError
from apps.jwt_auth.domain.exceptions.validation import ValidationError
from apps.jwt_auth.domain.value_objects.member_id import MemberId, RawMemberId
from apps.jwt_auth.domain.value_objects.token_claims import TokenClaims
from apps.jwt_auth.infrastructure.security.clock import (
    Clock,
    millis_to_numeric_date,
    numeric_date_to_millis,
    system_clock,
)
from apps.jwt_auth.infrastructure.security.config import TokenManagerConfig

logger = logging.getLogger(__name__)

TOKEN_HEADER_TYPE = "JWT"

# 커스텀 클레임 키
MEMBER_ID_CLAIM = "memberId"
ROLE_CLAIM = "role"

# 만료는 매니저의 clock으로 직접 판정한다
_DECODE_OPTIONS = {"verify_exp": False, "verify_nbf": False, "verify_aud": False}


class TokenManager:
    """JWT 토큰 매니저.

    상태를 갖지 않으며(설정은 불변) 동시 호출에 안전합니다.
    secret 교체가 필요하면 새 인스턴스를 생성합니다.
    """

    __slots__ = ("_config", "_clock")

    def __init__(self, config: TokenManagerConfig, *, clock: Clock | None = None) -> None:
        self._config = config
        self._clock = clock or system_clock

    def __repr__(self) -> str:
        return (
            "TokenManager("
            f"access_token_lifetime_millis={self._config.access_token_lifetime_millis}, "
            f"refresh_token_lifetime_millis={self._config.refresh_token_lifetime_millis})"
        )

    # ------------------------------------------------------------
    # Issue
    # ------------------------------------------------------------

    def issue(self, member_id: MemberId | RawMemberId, role: Role | str) -> TokenPair:
        """액세스/리프레시 토큰 쌍 발급.

        각 토큰은 생성 직전에 현재 시각을 따로 읽어 iat/exp를 계산합니다.

        Raises:
            InvalidMemberIdError: 표현할 수 없는 회원 ID
            InvalidRoleError: 알 수 없는 역할
        """
        member = MemberId.of(member_id)
        member_role = Role.from_value(role)

        access_token, access_expire_at = self._create_token(
            TokenType.ACCESS,
            member,
            self._config.access_token_lifetime_millis,
            role=member_role,
        )
        # 리프레시 토큰에는 role을 담지 않는다
        refresh_token, refresh_expire_at = self._create_token(
            TokenType.REFRESH,
            member,
            self._config.refresh_token_lifetime_millis,
        )

        logger.debug(
            "Token pair issued",
            extra={
                "member_id": str(member),
                "access_expires_at": access_expire_at,
                "refresh_expires_at": refresh_expire_at,
            },
        )

        return TokenPair(
            grant_type=GrantType.BEARER.value,
            access_token=access_token,
            refresh_token=refresh_token,
            access_token_expire_time=access_expire_at,
            refresh_token_expire_time=refresh_expire_at,
        )

    def _create_token(
        self,
        token_type: TokenType,
        member_id: MemberId,
        lifetime_millis: int,
        *,
        role: Role | None = None,
    ) -> tuple[str, int]:
        """토큰 생성. (토큰, 만료 시각 ms) 반환."""
        issued_at = self._clock()
        expire_at = issued_at + lifetime_millis

        payload: dict[str, Any] = {
            "sub": token_type.value,
            "iat": millis_to_numeric_date(issued_at),
            "exp": millis_to_numeric_date(expire_at),
            MEMBER_ID_CLAIM: member_id.to_claim(),
        }
        if role is not None:
            payload[ROLE_CLAIM] = role.value

        token = jwt.encode(
            payload,
            self._config.signing_secret,
            algorithm=self._config.algorithm,
            headers={"typ": TOKEN_HEADER_TYPE},
        )
        return token, expire_at

    # ------------------------------------------------------------
    # Validate / Extract
    # ------------------------------------------------------------

    def validate(self, token: str) -> None:
        """토큰 서명과 만료 검증.

        Raises:
            InvalidTokenError: 위조/변조/형식 오류, 또는 발급 시각이 미래인 토큰
            TokenExpiredError: now >= exp
        """
        claims = self.extract_claims(token)
        now = self._clock()

        if claims.is_expired_at(now):
            logger.info(
                "Token expired",
                extra={
                    "member_id": str(claims.member_id),
                    "token_type": claims.subject.value,
                    "expiration": claims.expiration,
                    "now": now,
                },
            )
            raise TokenExpiredError()

        if claims.is_issued_after(now):
            logger.info(
                "Token issued in the future",
                extra={
                    "member_id": str(claims.member_id),
                    "issued_at": claims.issued_at,
                    "now": now,
                },
            )
            raise InvalidTokenError("Token used before issued")

    def extract_claims(self, token: str) -> TokenClaims:
        """서명 검증 후 클레임 반환.

        만료된 토큰이라도 서명이 유효하면 클레임을 반환합니다 (감사 로그 용도).

        Raises:
            InvalidTokenError: 위조/변조/형식 오류
        """
        payload = self._verify(token)
        try:
            return self._to_claims(payload)
        except InvalidTokenError as e:
            logger.info("Invalid token claims", extra={"reason": e.message})
            raise

    def _verify(self, token: str) -> Mapping[str, Any]:
        """서명/헤더 검증 후 페이로드 반환."""
        if not isinstance(token, str) or not token:
            logger.info("Invalid token", extra={"reason": "empty"})
            raise InvalidTokenError("Token is empty")

        try:
            payload = jwt.decode(
                token,
                self._config.signing_secret,
                algorithms=[self._config.algorithm],
                options=_DECODE_OPTIONS,
            )
            header = jwt.get_unverified_header(token)
        # jose의 iat 검사는 null/list 값에 TypeError를 그대로 던진다
        except (JOSEError, TypeError, ValueError) as e:
            logger.info("Invalid token", extra={"reason": type(e).__name__})
            raise InvalidTokenError(str(e)) from e

        if header.get("typ") != TOKEN_HEADER_TYPE:
            logger.info("Invalid token", extra={"reason": "header type mismatch"})
            raise InvalidTokenError("Unexpected token header type")
        return payload

    @staticmethod
    def _to_claims(payload: Mapping[str, Any]) -> TokenClaims:
        """페이로드를 TokenClaims로 안전하게 변환."""
        try:
            subject = TokenType(payload.get("sub"))
        except ValueError as e:
            raise InvalidTokenError("Unknown token subject") from e

        try:
            issued_at = numeric_date_to_millis(payload.get("iat"))
            expiration = numeric_date_to_millis(payload.get("exp"))
        except ValueError as e:
            raise InvalidTokenError(f"Malformed timestamp: {e}") from e

        if MEMBER_ID_CLAIM not in payload:
            raise InvalidTokenError("Missing memberId claim")
        try:
            member_id = MemberId.from_claim(payload[MEMBER_ID_CLAIM])
        except ValidationError as e:
            raise InvalidTokenError("Malformed memberId claim") from e

        role: Role | None = None
        if subject is TokenType.ACCESS:
            try:
                role = Role.from_value(payload.get(ROLE_CLAIM))
            except ValidationError as e:
                raise InvalidTokenError("Malformed role claim") from e
        elif ROLE_CLAIM in payload:
            raise InvalidTokenError("Refresh token must not carry a role")

        return TokenClaims(
            subject=subject,
            issued_at=issued_at,
            expiration=expiration,
            member_id=member_id,
            role=role,
        )

"""Token HTTP Schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from apps.jwt_auth.application.token.dto import TokenPair
from apps.jwt_auth.domain.value_objects.token_claims import TokenClaims
from apps.jwt_auth.infrastructure.security.clock import millis_to_datetime


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class TokenPairResponse(_CamelModel):
    """토큰 쌍 발급 응답."""

    grant_type: str = Field(..., alias="grantType", description="토큰 전달 방식")
    access_token: str = Field(..., alias="accessToken", description="액세스 토큰")
    refresh_token: str = Field(..., alias="refreshToken", description="리프레시 토큰")
    access_token_expire_time: datetime = Field(
        ..., alias="accessTokenExpireTime", description="액세스 토큰 만료 시각 (UTC)"
    )
    refresh_token_expire_time: datetime = Field(
        ..., alias="refreshTokenExpireTime", description="리프레시 토큰 만료 시각 (UTC)"
    )

    @classmethod
    def from_pair(cls, pair: TokenPair) -> "TokenPairResponse":
        return cls(
            grant_type=pair.grant_type,
            access_token=pair.access_token,
            refresh_token=pair.refresh_token,
            access_token_expire_time=millis_to_datetime(pair.access_token_expire_time),
            refresh_token_expire_time=millis_to_datetime(pair.refresh_token_expire_time),
        )


class TokenClaimsResponse(_CamelModel):
    """토큰 클레임 응답."""

    subject: str = Field(..., description="토큰 종류 (ACCESS/REFRESH)")
    issued_at: datetime = Field(..., alias="issuedAt", description="발급 시각 (UTC)")
    expiration: datetime = Field(..., description="만료 시각 (UTC)")
    member_id: int | str = Field(..., alias="memberId", description="회원 ID")
    role: str | None = Field(None, description="회원 역할 (리프레시 토큰은 없음)")

    @classmethod
    def from_claims(cls, claims: TokenClaims) -> "TokenClaimsResponse":
        return cls(
            subject=claims.subject.value,
            issued_at=millis_to_datetime(claims.issued_at),
            expiration=millis_to_datetime(claims.expiration),
            member_id=claims.member_id.value,
            role=claims.role.value if claims.role else None,
        )


class ErrorResponse(BaseModel):
    """에러 응답."""

    detail: str = Field(..., description="에러 메시지")
    code: str = Field(..., description="에러 코드")

"""Application Settings.

env_prefix="JWT_" 사용으로 JWT_TOKEN_SECRET 등의 환경변수를 매핑합니다.
코어(TokenManager)는 이 설정을 직접 읽지 않고,
to_token_config()로 만든 불변 설정 값만 주입받습니다.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from apps.jwt_auth.infrastructure.security.config import TokenManagerConfig


class Settings(BaseSettings):
    """애플리케이션 설정.

    예시:
        JWT_TOKEN_SECRET → token_secret
        JWT_ACCESS_TOKEN_EXPIRATION_TIME → access_token_expiration_time
    """

    # Service
    app_name: str = "JWT Auth API"
    environment: str = Field(
        default="local",
        validation_alias=AliasChoices("ENVIRONMENT", "JWT_ENVIRONMENT"),
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "JWT_LOG_LEVEL"),
    )
    service_name: str = Field(
        default="jwt-auth-api",
        validation_alias=AliasChoices("SERVICE_NAME", "JWT_SERVICE_NAME"),
    )
    service_version: str = "1.0.0"

    # Token (밀리초 단위)
    access_token_expiration_time: int = 15 * 60 * 1000  # 15분
    refresh_token_expiration_time: int = 14 * 24 * 60 * 60 * 1000  # 14일
    token_secret: SecretStr

    model_config = SettingsConfigDict(
        env_prefix="JWT_",
        case_sensitive=False,
        extra="ignore",
    )

    def to_token_config(self) -> TokenManagerConfig:
        """TokenManager에 주입할 불변 설정 생성.

        Raises:
            TokenConfigError: 사용할 수 없는 secret/유효 기간
        """
        return TokenManagerConfig.create(
            access_token_lifetime_millis=self.access_token_expiration_time,
            refresh_token_lifetime_millis=self.refresh_token_expiration_time,
            signing_secret=self.token_secret.get_secret_value(),
        )


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환 (FastAPI 공식 패턴)."""
    return Settings()

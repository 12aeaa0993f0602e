"""Token DTOs."""

from apps.jwt_auth.application.token.dto.token import TokenPair

__all__ = ["TokenPair"]

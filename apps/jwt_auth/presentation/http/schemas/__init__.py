"""HTTP Schemas."""

from apps.jwt_auth.presentation.http.schemas.token import (
    ErrorResponse,
    TokenClaimsResponse,
    TokenPairResponse,
)

__all__ = ["ErrorResponse", "TokenClaimsResponse", "TokenPairResponse"]

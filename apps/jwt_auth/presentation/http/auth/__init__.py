"""HTTP Auth Dependencies."""

from apps.jwt_auth.presentation.http.auth.dependencies import (
    get_bearer_token,
    get_token_claims,
    parse_bearer,
)

__all__ = ["get_bearer_token", "get_token_claims", "parse_bearer"]

"""Token Ports."""

from apps.jwt_auth.application.token.ports.token_issuer import TokenIssuer

__all__ = ["TokenIssuer"]

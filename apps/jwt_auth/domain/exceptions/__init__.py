"""Domain Exceptions."""

from apps.jwt_auth.domain.exceptions.auth import (
    InvalidTokenError,
    TokenError,
    TokenErrorKind,
    TokenExpiredError,
)
from apps.jwt_auth.domain.exceptions.base import DomainError
from apps.jwt_auth.domain.exceptions.validation import (
    InvalidMemberIdError,
    InvalidRoleError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "TokenErrorKind",
    "TokenError",
    "TokenExpiredError",
    "InvalidTokenError",
    "ValidationError",
    "InvalidMemberIdError",
    "InvalidRoleError",
]

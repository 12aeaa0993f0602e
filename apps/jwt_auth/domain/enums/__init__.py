"""Domain Enums."""

from apps.jwt_auth.domain.enums.grant_type import GrantType
from apps.jwt_auth.domain.enums.role import Role
from apps.jwt_auth.domain.enums.token_type import TokenType

__all__ = ["GrantType", "Role", "TokenType"]

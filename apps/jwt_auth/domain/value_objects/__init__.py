"""Domain Value Objects."""

from apps.jwt_auth.domain.value_objects.member_id import MemberId
from apps.jwt_auth.domain.value_objects.token_claims import TokenClaims

__all__ = ["MemberId", "TokenClaims"]

"""Enum / 예외 테스트."""

from __future__ import annotations

import pytest

from apps.jwt_auth.domain.enums import GrantType, Role, TokenType
from apps.jwt_auth.domain.exceptions import (
    DomainError,
    InvalidRoleError,
    InvalidTokenError,
    TokenError,
    TokenErrorKind,
    TokenExpiredError,
)


class TestRole:
    """Role Enum 테스트."""

    def test_from_value(self) -> None:
        assert Role.from_value("ADMIN") is Role.ADMIN
        assert Role.from_value(Role.USER) is Role.USER

    @pytest.mark.parametrize("value", ["admin", "ROOT", "", None, 1])
    def test_from_value_rejects_unknown(self, value) -> None:
        with pytest.raises(InvalidRoleError):
            Role.from_value(value)


class TestEnumValues:
    def test_wire_values(self) -> None:
        assert TokenType.ACCESS.value == "ACCESS"
        assert TokenType.REFRESH.value == "REFRESH"
        assert GrantType.BEARER.value == "BEARER"


class TestTokenErrors:
    """토큰 예외 분류 테스트."""

    def test_error_kinds(self) -> None:
        assert TokenExpiredError().kind is TokenErrorKind.EXPIRED
        assert InvalidTokenError().kind is TokenErrorKind.INVALID

    def test_hierarchy(self) -> None:
        for exc in (TokenExpiredError(), InvalidTokenError("bad")):
            assert isinstance(exc, TokenError)
            assert isinstance(exc, DomainError)

    def test_kinds_are_distinct_types(self) -> None:
        """만료와 무효는 서로 잡히지 않는다."""
        assert not isinstance(TokenExpiredError(), InvalidTokenError)
        assert not isinstance(InvalidTokenError(), TokenExpiredError)

    def test_message(self) -> None:
        exc = InvalidTokenError("Malformed memberId claim")

        assert exc.message == "Malformed memberId claim"
        assert str(exc) == "Malformed memberId claim"

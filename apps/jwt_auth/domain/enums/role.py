"""Role Enum.

회원 역할을 정의합니다.
"""

from __future__ import annotations

from enum import Enum

from apps.jwt_auth.domain.exceptions.validation import InvalidRoleError


class Role(str, Enum):
    """회원 역할 (닫힌 집합)."""

    USER = "USER"
    ADMIN = "ADMIN"

    @classmethod
    def from_value(cls, value: "Role | str") -> "Role":
        """문자열 또는 Role에서 Role 생성.

        Args:
            value: 역할 값 (대소문자 구분)

        Raises:
            InvalidRoleError: 알 수 없는 역할
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidRoleError(value) from e


__all__ = ["Role"]

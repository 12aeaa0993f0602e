"""Validation Exceptions."""

from __future__ import annotations

from typing import Any

from apps.jwt_auth.domain.exceptions.base import DomainError


class ValidationError(DomainError):
    """입력값 검증 실패."""


class InvalidMemberIdError(ValidationError):
    """표현할 수 없는 회원 ID."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid member id: {value!r}")


class InvalidRoleError(ValidationError):
    """알 수 없는 역할."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid role: {value!r}")

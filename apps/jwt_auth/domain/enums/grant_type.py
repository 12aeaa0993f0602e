"""GrantType Enum."""

from enum import Enum


class GrantType(str, Enum):
    """토큰 전달 방식."""

    BEARER = "BEARER"


__all__ = ["GrantType"]

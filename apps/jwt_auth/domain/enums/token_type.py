"""TokenType Enum.

토큰 종류(sub 클레임)를 정의합니다.
"""

from enum import Enum


class TokenType(str, Enum):
    """토큰 종류.

    JWT의 sub 클레임에 기록됩니다. 주체(회원)가 아닌 토큰의 용도를 나타냅니다.
    """

    ACCESS = "ACCESS"
    REFRESH = "REFRESH"


__all__ = ["TokenType"]

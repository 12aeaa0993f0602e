"""MemberId Value Object."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Union

from apps.jwt_auth.domain.exceptions.validation import InvalidMemberIdError
from apps.jwt_auth.domain.value_objects.base import ValueObject

# 64비트 부호 있는 정수 범위
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# float로 인코딩된 정수가 손실 없이 표현되는 최대 절댓값
MAX_SAFE_FLOAT_INTEGER = 2**53

RawMemberId = Union[int, str]


@dataclass(frozen=True, slots=True)
class MemberId(ValueObject):
    """회원 ID Value Object.

    정수(64비트 부호 있는 범위) 또는 비어 있지 않은 문자열만 허용합니다.
    회원 존재 여부는 검증하지 않습니다.
    """

    value: RawMemberId

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        # bool은 int의 하위 타입이므로 먼저 걸러낸다
        if isinstance(self.value, bool):
            raise InvalidMemberIdError(self.value)
        if isinstance(self.value, int):
            if not INT64_MIN <= self.value <= INT64_MAX:
                raise InvalidMemberIdError(self.value)
            return
        if isinstance(self.value, str):
            if not self.value:
                raise InvalidMemberIdError(self.value)
            return
        raise InvalidMemberIdError(self.value)

    @classmethod
    def of(cls, value: "MemberId | RawMemberId") -> "MemberId":
        """MemberId 또는 원시 값에서 MemberId 생성."""
        if isinstance(value, cls):
            return value
        return cls(value=value)

    @classmethod
    def from_claim(cls, raw: Any) -> "MemberId":
        """JWT 클레임 값에서 MemberId 복원.

        JSON 숫자는 디코더에 따라 float로 올 수 있으므로
        정수로 손실 없이 변환되는 경우에만 허용합니다.

        Raises:
            InvalidMemberIdError: 표현할 수 없는 값
        """
        if isinstance(raw, float):
            if not math.isfinite(raw) or not raw.is_integer():
                raise InvalidMemberIdError(raw)
            if abs(raw) > MAX_SAFE_FLOAT_INTEGER:
                raise InvalidMemberIdError(raw)
            raw = int(raw)
        return cls(value=raw)

    def to_claim(self) -> RawMemberId:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

"""Clock & NumericDate helpers.

토큰 시각은 내부적으로 epoch milliseconds 정수로 다룹니다.
JWT의 iat/exp에는 밀리초 소수부를 가진 NumericDate(초)로 기록합니다.
"""

from __future__ import annotations

import math
import time
from datetime import datetime, timezone
from typing import Any, Callable

Clock = Callable[[], int]

MILLIS_PER_SECOND = 1000


def system_clock() -> int:
    """현재 UTC epoch milliseconds 반환."""
    return time.time_ns() // 1_000_000


def millis_to_numeric_date(millis: int) -> float:
    return millis / MILLIS_PER_SECOND


def numeric_date_to_millis(value: Any) -> int:
    """NumericDate(초, 소수 허용)를 epoch milliseconds로 변환.

    Raises:
        ValueError: 숫자가 아니거나 유한하지 않은 값
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"NumericDate must be a number, got {type(value).__name__}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError("NumericDate must be finite")
    if isinstance(value, int):
        return value * MILLIS_PER_SECOND
    scaled = value * MILLIS_PER_SECOND
    if not math.isfinite(scaled):
        raise ValueError("NumericDate out of range")
    return round(scaled)


def millis_to_datetime(millis: int) -> datetime:
    """epoch milliseconds를 UTC datetime으로 변환."""
    seconds, remainder = divmod(millis, MILLIS_PER_SECOND)
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(
        microsecond=remainder * 1000
    )

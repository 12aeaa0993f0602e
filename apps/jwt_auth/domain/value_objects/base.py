"""Value Object 베이스."""


class ValueObject:
    """불변 Value Object 마커 베이스.

    하위 클래스는 ``@dataclass(frozen=True, slots=True)``로 선언합니다.
    """

    __slots__ = ()

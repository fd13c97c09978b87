"""
0으로 나누기를 예외 대신 Nothing 으로 표현하는 나눗셈 연산.

Division operations that report a zero divisor as Nothing instead of raising.

나눗셈 자체의 실패(오버플로 등)는 타입의 동작을 그대로 따른다.
Failures of the type's own division (overflow, NaN, ...) are left untouched.
"""

from .numeric import FloorNumeric, Numeric
from .option import Nothing, Option, Some


def safe_divide[T: Numeric](a: T, b: T) -> Option[T]:
    """
    b 가 0이면 Nothing, 아니면 Some(a / b) 를 반환한다.
    Return Nothing when `b` is zero, otherwise Some(a / b).
    """
    if b == 0:
        return Nothing()
    return Some(a / b)


def safe_floor_divide[T: FloorNumeric](a: T, b: T) -> Option[T]:
    """
    b 가 0이면 Nothing, 아니면 Some(a // b) 를 반환한다.
    Return Nothing when `b` is zero, otherwise Some(a // b).
    """
    if b == 0:
        return Nothing()
    return Some(a // b)


__all__ = [
    "safe_divide",
    "safe_floor_divide",
]

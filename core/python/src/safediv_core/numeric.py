from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class Numeric(Protocol):
    """
    0과의 동등 비교와 나눗셈(`/`)을 지원하는 타입.
    A type that can be compared against zero and divided with `/`.

    int, float, complex, Decimal, Fraction, numpy 스칼라 등이 해당된다.
    Satisfied by int, float, complex, Decimal, Fraction and numpy scalars.
    """

    def __eq__(self, other: object, /) -> bool: ...

    def __truediv__(self, other: Self, /) -> Self: ...


@runtime_checkable
class FloorNumeric(Protocol):
    """
    0과의 동등 비교와 버림 나눗셈(`//`)을 지원하는 타입.
    A type that can be compared against zero and floor-divided with `//`.
    """

    def __eq__(self, other: object, /) -> bool: ...

    def __floordiv__(self, other: Self, /) -> Self: ...


__all__ = [
    "Numeric",
    "FloorNumeric",
]

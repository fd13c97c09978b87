from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Ok[T]:
    """
    서비스 계층의 성공 결과를 담습니다.

    Successful branch of a service-level Result.
    """

    __match_args__ = ("value",)

    value: T


@dataclass(slots=True, frozen=True)
class Err[E]:
    """
    서비스 계층의 실패 정보를 담습니다.

    Failure branch of a service-level Result.
    """

    __match_args__ = ("error",)

    error: E


type Result[T, E] = Ok[T] | Err[E]
"""
서비스 경계(피연산자 파싱, 산술 실패 보고)에서만 쓰이는 Result 타입입니다.
0으로 나누기는 에러가 아니라 Option 의 Nothing 으로 표현됩니다.

Result type used only at service boundaries (operand parsing,
arithmetic failure reporting). A zero divisor is never an Err:
it is reported as Nothing through Option.
"""


def is_ok[T, E](result: Result[T, E]) -> bool:
    """Return True if the given Result is an Ok value."""
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> bool:
    """Return True if the given Result is an Err value."""
    return isinstance(result, Err)


__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
]

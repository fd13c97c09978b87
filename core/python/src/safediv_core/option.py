from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Some[T]:
    """
    값이 존재하는 경우(present)를 나타내는 래퍼입니다.

    Wrapper type that represents the present branch of an Option.
    """

    # match Some(value) 구문에서 위치 인자로 매칭될 필드 정의
    # Define which field is used positionally in `match Some(value)`
    __match_args__ = ("value",)

    value: T


@dataclass(slots=True, frozen=True)
class Nothing:
    """
    값이 없는 경우(absent)를 나타냅니다. 아무 데이터도 담지 않습니다.

    Represents the absent branch of an Option. Carries no data.
    """

    __match_args__ = ()


type Option[T] = Some[T] | Nothing
"""
값이 있거나(Some) 없는(Nothing) 두 가지 경우만 갖는 공용 Option 타입입니다.

Generic Option type with exactly two variants: Some (carries a value)
and Nothing (carries nothing).

- T: 값이 존재할 때 담기는 타입 (present value type)
"""


def is_some[T](option: Option[T]) -> bool:
    """
    Option이 Some 인지 여부를 반환합니다.

    Return True if the given Option carries a value.
    """
    return isinstance(option, Some)


def is_nothing[T](option: Option[T]) -> bool:
    """
    Option이 Nothing 인지 여부를 반환합니다.

    Return True if the given Option is absent.
    """
    return isinstance(option, Nothing)


def unwrap_or[T](option: Option[T], default: T) -> T:
    """
    Some 이면 담긴 값을, Nothing 이면 default 를 반환합니다.

    Return the carried value, or `default` when the Option is absent.
    """
    match option:
        case Some(value):
            return value
        case _:
            return default


def to_optional[T](option: Option[T]) -> T | None:
    """
    Option 을 파이썬 기본 Optional(T | None) 로 변환합니다.

    Convert an Option into Python's native optional (`T | None`).
    """
    match option:
        case Some(value):
            return value
        case _:
            return None


__all__ = [
    "Some",
    "Nothing",
    "Option",
    "is_some",
    "is_nothing",
    "unwrap_or",
    "to_optional",
]

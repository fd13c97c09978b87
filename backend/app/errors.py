from dataclasses import dataclass
from enum import Enum

from fastapi import HTTPException, status

from safediv_core import Result


class DivisionErrorCode(str, Enum):
    """
    나눗셈 서비스에서 발생하는 에러 코드.
    0으로 나누기는 에러가 아니므로 여기에 없다.

    Error codes raised by the division service.
    A zero divisor is not an error and has no code here.
    """

    INVALID_OPERAND = "invalid_operand"
    ARITHMETIC_FAILURE = "arithmetic_failure"


@dataclass(slots=True, frozen=True)
class DivisionError:
    """
    나눗셈 서비스 도메인 에러 표현.
    Domain error representation for the division service.
    """

    code: DivisionErrorCode
    message: str


type DivisionResult[T] = Result[T, DivisionError]


def map_division_error_to_http_exception(error: DivisionError) -> HTTPException:
    """
    DivisionError 를 HTTPException 으로 변환한다.
    Map a DivisionError into an HTTPException.
    """
    match error.code:
        case DivisionErrorCode.INVALID_OPERAND:
            return HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=error.message,
            )
        case DivisionErrorCode.ARITHMETIC_FAILURE:
            return HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=error.message,
            )
        case _:
            return HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=error.message,
            )

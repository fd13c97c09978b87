from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Any, Final
import logging

import numpy as np

from safediv_core import Err, Nothing, Ok, Option, Some, safe_divide, safe_floor_divide

from app.config import Settings, get_settings
from app.errors import DivisionError, DivisionErrorCode, DivisionResult
from app.models.model_io_divide import (
    DivideRequest,
    DivideResponse,
    DivisionOperator,
    NumericTypeName,
)


logger = logging.getLogger(__name__)

type RawOperand = int | float | str


def _to_int(raw: RawOperand) -> int:
    """정수로 변환한다. 소수부가 있는 float 는 거부한다.
    Convert to int, rejecting floats with a fractional part.
    """
    if isinstance(raw, float) and not raw.is_integer():
        raise ValueError(f"{raw!r} is not an integral value")
    return int(raw)


def _to_decimal(raw: RawOperand) -> Decimal:
    # float 는 이진 표현 대신 repr 문자열을 거쳐 변환한다.
    # Go through repr for floats so 0.1 becomes Decimal("0.1").
    if isinstance(raw, float):
        return Decimal(repr(raw))
    return Decimal(raw)


# 숫자 타입 이름 → 변환 함수 / Numeric type name → converter
_CONVERTERS: Final[dict[str, Callable[[RawOperand], Any]]] = {
    "int": _to_int,
    "float": float,
    "decimal": _to_decimal,
    "fraction": Fraction,
    "float32": np.float32,
    "float64": np.float64,
    "int64": lambda raw: np.int64(_to_int(raw)),
}

_OPERATORS: Final[dict[str, Callable[[Any, Any], Option[Any]]]] = {
    "truediv": safe_divide,
    "floordiv": safe_floor_divide,
}


def parse_operand(
    raw: RawOperand,
    numeric_type: NumericTypeName,
) -> DivisionResult[Any]:
    """
    JSON 으로 받은 피연산자를 지정한 숫자 타입으로 변환한다.
    Convert a JSON operand into the requested numeric type.
    """
    # bool 은 int 의 하위 클래스이지만 피연산자로 받지 않는다.
    # bool subclasses int but is not accepted as an operand.
    if isinstance(raw, bool):
        return Err(
            DivisionError(
                code=DivisionErrorCode.INVALID_OPERAND,
                message=f"Cannot convert {raw!r} to {numeric_type}: booleans are not numbers",
            )
        )

    converter = _CONVERTERS[numeric_type]
    try:
        return Ok(converter(raw))
    except (ValueError, TypeError, OverflowError, ZeroDivisionError, InvalidOperation) as exc:
        # Fraction("1/0") 은 ZeroDivisionError 를 낸다.
        # Fraction("1/0") raises ZeroDivisionError.
        return Err(
            DivisionError(
                code=DivisionErrorCode.INVALID_OPERAND,
                message=f"Cannot convert {raw!r} to {numeric_type}: {exc}",
            )
        )


def _render(option: Option[Any]) -> tuple[bool, str | None]:
    match option:
        case Some(value):
            return True, str(value)
        case Nothing():
            return False, None
        case _:
            raise TypeError(f"Unexpected option value: {option!r}")


def divide(
    request: DivideRequest,
    settings: Settings | None = None,
) -> DivisionResult[DivideResponse]:
    """
    DivideRequest 를 받아 안전한 나눗셈을 수행한다.
    Run a safe division for the given DivideRequest.

    제수가 0이면 present=False 인 정상 응답을 돌려준다.
    A zero divisor yields a normal response with present=False.
    """
    settings = settings or get_settings()
    numeric_type = request.numeric_type or settings.default_numeric_type
    operator: DivisionOperator = request.operator

    operands = []
    for raw in (request.a, request.b):
        match parse_operand(raw, numeric_type):
            case Ok(value=value):
                operands.append(value)
            case Err(error=error):
                logger.warning("Operand rejected: %s", error.message)
                return Err(error)

    a, b = operands
    try:
        option = _OPERATORS[operator](a, b)
    except ArithmeticError as exc:
        # 0 이외의 제수에서 타입 자체의 나눗셈이 실패한 경우 (오버플로 등).
        # The type's own division failed for a non-zero divisor (overflow, ...).
        logger.warning(
            "Arithmetic failure for %s %s %s (%s): %s",
            a, operator, b, numeric_type, exc,
        )
        return Err(
            DivisionError(
                code=DivisionErrorCode.ARITHMETIC_FAILURE,
                message=f"{numeric_type} {operator} failed: {exc}",
            )
        )

    present, value = _render(option)
    logger.debug(
        "%s %s %s (%s) -> present=%s value=%s",
        a, operator, b, numeric_type, present, value,
    )
    return Ok(
        DivideResponse(
            present=present,
            value=value,
            numeric_type=numeric_type,
            operator=operator,
        )
    )

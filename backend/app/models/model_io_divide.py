from typing import Literal

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr


# 지원하는 숫자 타입 이름. service_divide 의 변환 테이블과 일치해야 한다.
# Supported numeric type names. Must match the converters in service_divide.
NumericTypeName = Literal[
    "int",
    "float",
    "decimal",
    "fraction",
    "float32",
    "float64",
    "int64",
]

# truediv 는 `/`, floordiv 는 `//` 에 대응한다.
# truediv maps to `/`, floordiv maps to `//`.
DivisionOperator = Literal["truediv", "floordiv"]

# JSON true/false 가 1/0 으로 바뀌지 않도록 strict 타입을 쓴다.
# Strict types so JSON true/false is rejected instead of coerced to 1/0.
Operand = StrictInt | StrictFloat | StrictStr


class DivideRequest(BaseModel):
    """
    한 쌍의 피연산자에 대한 나눗셈 요청.
    Division request for a single pair of operands.

    Decimal/Fraction 은 정확한 값을 위해 문자열("1.10", "7/3")로 보낼 수 있다.
    Decimal and Fraction operands may be sent as strings ("1.10", "7/3")
    to keep them exact.
    """

    a: Operand = Field(
        ...,
        description="피제수 / Dividend.",
    )
    b: Operand = Field(
        ...,
        description="제수 / Divisor.",
    )
    numeric_type: NumericTypeName | None = Field(
        default=None,
        description=(
            "두 피연산자를 변환할 숫자 타입. 없으면 설정의 기본값을 사용한다.\n"
            "Numeric type both operands are converted to. "
            "Falls back to the configured default when omitted."
        ),
    )
    operator: DivisionOperator = Field(
        default="truediv",
        description="나눗셈 연산자 / Division operator.",
    )


class DivideResponse(BaseModel):
    """
    나눗셈 결과 응답.
    Division result response.

    - present: 제수가 0이 아니어서 몫이 존재하는지 여부
    - value: str() 로 표현한 몫. present=False 이면 None
    """

    present: bool
    value: str | None = None
    numeric_type: NumericTypeName
    operator: DivisionOperator

from fastapi import APIRouter, HTTPException

from safediv_core import Err, Ok

from app.dependencies import SettingsDep
from app.errors import map_division_error_to_http_exception
from app.models.model_io_divide import DivideRequest, DivideResponse
from app.services.service_divide import divide


# prefix 는 main.py 의 include_router 에서 관리한다.
# Router-level prefix is managed in main.py via include_router.
router = APIRouter()


@router.post(
    "",
    response_model=DivideResponse,
    summary="0에 안전한 나눗셈 / Zero-safe division",
    description=(
        "두 피연산자를 지정한 숫자 타입으로 나눕니다. 제수가 0이면 present=false 를 반환합니다.\n"
        "Divide two operands in the requested numeric type. "
        "A zero divisor returns present=false instead of an error."
    ),
)
async def divide_endpoint(
    request: DivideRequest,
    settings: SettingsDep,
) -> DivideResponse:
    """
    안전한 나눗셈 엔드포인트.
    Zero-safe division endpoint.
    """
    result = divide(request, settings)

    match result:
        case Ok(value=response):
            return response

        case Err(error=division_error):
            raise map_division_error_to_http_exception(division_error)

        case _:
            # Result 타입이 아닌 예기치 못한 값이 온 경우.
            # Unexpected result type (invariant broken).
            raise HTTPException(
                status_code=500,
                detail="Unexpected result type from divide.",
            )

from fastapi import APIRouter

from app.dependencies import SettingsDep

router = APIRouter()


@router.get(
    "/",
    summary="기본 헬스 체크 / Basic health check",
)
async def get_health_status(settings: SettingsDep) -> dict[str, str]:
    """
    서버 상태를 확인하는 헬스 체크 엔드포인트.
    Health check endpoint to verify server status.
    """
    return {
        "status": "ok",
        "app_version": settings.app_version,
        "environment": settings.environment,
    }

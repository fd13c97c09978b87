from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from app.config import get_settings
from app.observability import setup_logging
from app.routers.router_divide import router as router_divide
from app.routers.router_health import router as router_health


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    앱 시작 시 로깅을 한 번 설정한다.
    Configure logging once on startup.
    """
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        "Starting %s %s (environment=%s)",
        settings.app_title, settings.app_version, settings.environment,
    )
    yield


def create_app() -> FastAPI:
    """
    설정을 반영한 FastAPI 앱을 만든다.
    Build the FastAPI application from settings.
    """
    settings = get_settings()
    application = FastAPI(
        title=settings.app_title,
        description=settings.app_description,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # 도메인 라우터 등록 / Register domain routers
    application.include_router(router_divide, prefix="/divide", tags=["divide"])
    application.include_router(router_health, prefix="/health", tags=["health"])
    return application


app = create_app()

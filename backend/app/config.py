from functools import lru_cache
from typing import Final, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models.model_io_divide import NumericTypeName


APP_TITLE_DEFAULT: Final[str] = "Safe Divide API"
APP_VERSION_DEFAULT: Final[str] = "0.1.0"
APP_DESCRIPTION_DEFAULT: Final[str] = "Zero-safe division backend (FastAPI)"


class Settings(BaseSettings):
    """
    애플리케이션 전역 설정.
    Global application settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SAFEDIV_",
        extra="ignore",
    )

    app_title: str = APP_TITLE_DEFAULT
    app_version: str = APP_VERSION_DEFAULT
    app_description: str = APP_DESCRIPTION_DEFAULT

    environment: str = Field(
        default="local",
        description=(
            "실행 환경(local/dev/prod 등) / "
            "Runtime environment (local/dev/prod, etc.)."
        ),
    )
    debug: bool = Field(
        default=False,
        description="디버그 모드 활성화 여부 / Whether to enable debug mode.",
    )

    log_level: str = Field(
        default="INFO",
        description="로그 레벨 / Root logging level (DEBUG, INFO, ...).",
    )
    log_format: Literal["text", "json"] = Field(
        default="text",
        description="로그 출력 형식 / Log output format (text or json).",
    )

    default_numeric_type: NumericTypeName = Field(
        default="float",
        description=(
            "요청에 numeric_type 이 없을 때 사용할 숫자 타입.\n"
            "Numeric type used when a request does not specify one."
        ),
    )


@lru_cache
def get_settings() -> Settings:
    """
    환경 변수 및 .env 파일에서 설정을 로드한다.
    Load settings from environment variables and .env file (cached).
    """
    return Settings()

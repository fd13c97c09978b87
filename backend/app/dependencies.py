from typing import Annotated

from fastapi import Depends

from app.config import Settings, get_settings


def get_app_settings() -> Settings:
    """
    FastAPI 의존성으로 사용할 설정 객체를 반환한다.
    테스트에서는 app.dependency_overrides 로 교체한다.

    Return application settings for FastAPI dependency injection.
    Tests swap it through app.dependency_overrides.
    """
    return get_settings()


# FastAPI 가 Annotated 메타데이터를 읽을 수 있도록 `type` 문 대신 일반 별칭을 쓴다.
# Plain alias rather than a `type` statement so FastAPI sees the Annotated metadata.
SettingsDep = Annotated[Settings, Depends(get_app_settings)]

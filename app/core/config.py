"""애플리케이션 전역 설정을 관리하는 모듈."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """환경 변수 기반 설정 모델."""

    SERVICE_SECRET: str = ""
    TIMELINE_DAY_START: str = "09:00"
    TIMELINE_SLOT_INTERVAL_MINUTES: int = 120
    TIMELINE_LATEST_START_HOUR: int = 23
    TIMELINE_MAX_ACTIVITIES_PER_DAY: int = 10
    TIMELINE_MIN_ACTIVITY_LENGTH: int = 10
    TIMELINE_MIN_LINE_LENGTH: int = 5
    APP_ENV: str = "development"
    DOCS_MODE: str = "disabled"
    EXPOSE_INTERNAL_ERRORS: bool = False
    CORS_ALLOW_ORIGINS: str = ""
    CORS_ALLOW_METHODS: str = "GET,POST,OPTIONS"
    CORS_ALLOW_HEADERS: str = "Content-Type,x-service-secret"
    CORS_ALLOW_CREDENTIALS: bool = False
    SECURITY_HEADERS_ENABLED: bool = True
    ENABLE_HSTS: bool = False
    HSTS_MAX_AGE_SECONDS: int = 31536000
    PROXY_HEADERS_ENABLED: bool = True
    PROXY_TRUSTED_HOSTS: str = "127.0.0.1"
    TRUSTED_HOSTS: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("TIMELINE_LATEST_START_HOUR", mode="before")
    @classmethod
    def _clamp_latest_start_hour(cls, value: object) -> int:
        try:
            numeric = int(value) if value is not None else 23
        except (TypeError, ValueError):
            numeric = 23
        return min(23, max(0, numeric))

    @field_validator("TIMELINE_MAX_ACTIVITIES_PER_DAY", mode="before")
    @classmethod
    def _clamp_max_activities_per_day(cls, value: object) -> int:
        try:
            numeric = int(value) if value is not None else 10
        except (TypeError, ValueError):
            numeric = 10
        return max(1, numeric)


@lru_cache
def get_settings() -> Settings:
    """Settings 인스턴스를 반환한다. 최초 호출 시에만 생성되고 이후 캐싱된다."""
    return Settings()

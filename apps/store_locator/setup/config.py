"""Store Locator Runtime Configuration."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Store Locator 런타임 설정."""

    # Service
    service_name: str = "store-locator"
    environment: str = "development"
    log_level: str = "INFO"
    engine_log_level: str | None = None
    log_format: str = "text"  # text | json

    # Google Maps Platform
    google_maps_api_key: str | None = Field(
        None,
        validation_alias=AliasChoices("STORE_LOCATOR_GOOGLE_MAPS_API_KEY", "GOOGLE_MAPS_API_KEY"),
    )
    google_api_timeout: float = 10.0

    # 정밀 거리 단계 동시 요청 상한
    precise_concurrency: int = Field(5, ge=1, le=50)

    # Device geolocation
    geolocation_enabled: bool = True
    geolocation_url: str = "http://ip-api.com/json"
    geolocation_timeout: float = 5.0

    model_config = SettingsConfigDict(
        env_prefix="STORE_LOCATOR_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤을 반환합니다."""
    return Settings()

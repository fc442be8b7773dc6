from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

KEKA_ATTENDANCE_SUMMARY_URL = (
    "https://triveniglobalsoft.keka.com/k/attendance/api/mytime/attendance/summary"
)


class Settings(BaseSettings):
    app_name: str = "WorktimeRelay"
    upstream_url: str = KEKA_ATTENDANCE_SUMMARY_URL
    upstream_user_agent: str = "Mozilla/5.0"
    default_location: str = "Surat-414"
    default_target_hours: float = 8
    require_productive_hours: bool = False
    cors_allow_origins: str = "*"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_cors_origins() -> list[str]:
    raw = get_settings().cors_allow_origins
    return [origin.strip() for origin in raw.split(",") if origin.strip()]

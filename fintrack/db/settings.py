from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_COLOR_PALETTE = [
    "#3B82F6",
    "#10B981",
    "#F59E0B",
    "#EF4444",
    "#8B5CF6",
    "#EC4899",
    "#14B8A6",
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Finance Tracker"
    app_host: str = "0.0.0.0"
    app_port: int = 4000
    database_url: str = "postgresql+asyncpg://postgres:postgres@db:5432/fintrack"
    log_level: str = "INFO"

    jwt_secret: str = "change-me-to-a-long-random-secret-value"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60 * 24 * 7

    upload_dir: str = "uploads"
    color_palette: list[str] = DEFAULT_COLOR_PALETTE


@lru_cache
def get_settings() -> Settings:
    return Settings()

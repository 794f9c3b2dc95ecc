"""Application configuration from environment."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env (prefix COMPASS_)."""

    app_name: str = "Compass Badges"
    debug: bool = False
    log_level: str = "INFO"

    # Database (async driver; Alembic converts to a sync URL)
    database_url: str = "sqlite+aiosqlite:///./compass_badges.db"

    # Badge catalog used for profiles without an age group
    default_age_group: str = "school"

    class Config:
        env_prefix = "COMPASS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HOOKSEED_", env_file=".env", extra="ignore")

    # Database
    database_url: str = "sqlite:///./hookseed.db"

    # Generation
    batch_size: int = 70
    random_seed: int | None = None

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()

# src/review_diff/config.py
import logging
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="REVIEW_DIFF_")

    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Set up root logging for applications embedding review_diff."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format=settings.log_format)

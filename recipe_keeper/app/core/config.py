import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Empty string fetches pages directly instead of through the relay.
    scraper_relay_url: str = Field("https://api.allorigins.win/get", alias="SCRAPER_RELAY_URL")
    scraper_user_agent: str = Field(
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 13_6) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36",
        alias="SCRAPER_USER_AGENT",
    )
    scraper_timeout_seconds: float = Field(15.0, alias="SCRAPER_TIMEOUT_SECONDS")
    scraper_max_ingredients: int = Field(10, alias="SCRAPER_MAX_INGREDIENTS")
    scraper_max_instructions: int = Field(8, alias="SCRAPER_MAX_INSTRUCTIONS")
    scraper_min_instruction_length: int = Field(20, alias="SCRAPER_MIN_INSTRUCTION_LENGTH")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    try:
        settings = Settings()
    except PermissionError:
        logger.warning("Unable to read .env; continuing with environment variables only")
        settings = Settings(_env_file=None)
    return settings

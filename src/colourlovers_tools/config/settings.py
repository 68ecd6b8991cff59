from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Upstream API
    colourlovers_api_base_url: str = Field(
        default="http://www.colourlovers.com/api/",
        alias="COLOURLOVERS_API_BASE_URL",
    )
    default_api_timeout_seconds: float = Field(
        default=20, alias="DEFAULT_API_TIMEOUT_SECONDS"
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    return Settings()

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PIXELS = 250
# MIN_PIXELS is the smallest icon edge in pixels
MIN_PIXELS = 100
# MAX_PIXELS is the largest icon edge in pixels
MAX_PIXELS = 500

DEFAULT_SIZE = 5
# MIN_SIZE is the smallest n can be in an n x n pattern
MIN_SIZE = 5
# MAX_SIZE is the largest n can be in an n x n pattern
MAX_SIZE = 20


class Settings(BaseSettings):
    default_pixels: int = Field(DEFAULT_PIXELS, ge=MIN_PIXELS, le=MAX_PIXELS)
    default_size: int = Field(DEFAULT_SIZE, ge=MIN_SIZE, le=MAX_SIZE)
    output_dir: str = "."
    jpeg_quality: int = Field(75, ge=1, le=95)
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="IDENTICON_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()

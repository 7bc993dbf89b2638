"""Application settings."""

import decimal
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ROUNDING_MODES = (
    decimal.ROUND_CEILING,
    decimal.ROUND_DOWN,
    decimal.ROUND_FLOOR,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_HALF_UP,
    decimal.ROUND_UP,
    decimal.ROUND_05UP,
)


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    log_level: str = "INFO"
    percent_precision: int = 16  # Significant digits of percent rates (decimal64)
    percent_rounding: str = decimal.ROUND_HALF_EVEN
    default_locale: str = ""  # Empty means the process default locale

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )

    @field_validator("percent_precision")
    @classmethod
    def _check_precision(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("percent_precision must be positive")
        return value

    @field_validator("percent_rounding")
    @classmethod
    def _check_rounding(cls, value: str) -> str:
        value = value.upper()
        if value not in ROUNDING_MODES:
            raise ValueError(f"percent_rounding must be one of {', '.join(ROUNDING_MODES)}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"log_level must be a logging level name, got {value!r}")
        return value


settings = Settings()

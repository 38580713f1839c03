"""
Configuration management for fraction_text.

Environment-based defaults using Pydantic BaseSettings. These settings seed
new formatter instances and the logging setup; a formatter's own
``FractionConfig`` stays the source of truth once it exists.

Environment variables use the ``FRACTEXT_`` prefix, e.g.
``FRACTEXT_PARSING_LOCALE=de_DE``. ``LOG_LEVEL`` is read without prefix.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("FRACTEXT_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Fields:
    - LOG_LEVEL: Logging level (uppercase, no prefix)
    - parsing_locale: Default locale for decimal/grouping symbols
    - locale_aware_parsing: Accept localized separators while parsing
    - max_denominator: When set, new formatters use MaxDenominator(bound)
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )
    parsing_locale: str = Field(
        default="en_US",
        description="Locale used to look up decimal and grouping symbols",
    )
    locale_aware_parsing: bool = Field(
        default=True,
        description="Whether localized separators are accepted while parsing",
    )
    max_denominator: Optional[int] = Field(
        default=None,
        description="Bound for MaxDenominator reduction; None keeps exact decimal digits",
    )

    @field_validator("max_denominator")
    @classmethod
    def _positive_bound(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value <= 0:
            raise ValueError("max_denominator must be a positive integer")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    model_config = SettingsConfigDict(
        env_prefix="FRACTEXT_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Tests that change environment variables must call
    ``get_settings.cache_clear()`` afterwards.
    """
    return Settings()

"""
Translator configuration.

Settings are read from DEFLANG_* environment variables or a local .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RUNTIME_PREAMBLE = "function add(x, y) { return x + y };"
DEFAULT_TEST_TRAILER = "console.log(f(1,2));"


class Settings(BaseSettings):
    """Translator settings"""

    model_config = SettingsConfigDict(
        env_prefix="DEFLANG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None

    # Files
    ENCODING: str = "utf-8"
    OUTPUT_SUFFIX: str = ".js"

    # Scaffolding placed around the generated function
    RUNTIME_PREAMBLE: str = DEFAULT_RUNTIME_PREAMBLE
    TEST_TRAILER: str = DEFAULT_TEST_TRAILER


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()

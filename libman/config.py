"""
Runtime settings for the print detail service.

Values come from the environment (or a local ``.env`` file) and are
handed to route functions through ``Depends(get_settings)`` so that
handlers never read process state directly.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service configuration.

    ``db_path`` points at the SQLite file holding the collection. It is
    left empty by default; requests fail with a database error until it
    is set.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    db_path: str = Field(default="", validation_alias="LIBMANDB_PATH")
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        default="INFO", validation_alias="LIBMAN_LOG_LEVEL"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    return Settings()

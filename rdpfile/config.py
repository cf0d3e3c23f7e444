from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CodecSettings(BaseSettings):
    log_level: LogLevel = Field("INFO", validation_alias="RDPFILE_LOG_LEVEL")
    log_ring_size: int = Field(200, validation_alias="RDPFILE_LOG_RING_SIZE")

    # Mask values of credential-bearing keys in logged events.
    redact_secrets: bool = Field(True, validation_alias="RDPFILE_REDACT_SECRETS")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache
def get_settings() -> CodecSettings:
    return CodecSettings()

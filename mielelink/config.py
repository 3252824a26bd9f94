import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings

from mielelink.parsing.values.decode import TimeParseFailurePolicy


class DecoderSettings(BaseSettings):
    log_ring_size: int = Field(200, validation_alias="MIELELINK_LOG_RING_SIZE")
    log_level: str = Field("INFO", validation_alias="MIELELINK_LOG_LEVEL")

    time_parse_failure_policy: TimeParseFailurePolicy = Field(
        TimeParseFailurePolicy.DEGRADE_TO_EPOCH, validation_alias="MIELELINK_TIME_PARSE_FAILURE_POLICY"
    )
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level


@lru_cache
def get_settings() -> DecoderSettings:
    return DecoderSettings()

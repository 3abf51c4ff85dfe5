"""
Configuration for the patient management console.
Loads settings from environment variables (or a local .env file).
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    log_level: str = Field(
        default="WARNING",
        alias="PATIENT_SYSTEM_LOG_LEVEL",
        description="Logging level"
    )
    seed_history: bool = Field(
        default=True,
        alias="PATIENT_SYSTEM_SEED_HISTORY",
        description="Load the ten demo visit records at startup"
    )
    patient_id_prefix: str = Field(
        default="P",
        alias="PATIENT_SYSTEM_ID_PREFIX",
        description="Prefix for generated patient IDs"
    )
    patient_id_start: int = Field(
        default=1,
        ge=0,
        alias="PATIENT_SYSTEM_ID_START",
        description="First number handed out by the patient ID generator"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        validate_assignment=True,
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level


def get_settings() -> Settings:
    return Settings()

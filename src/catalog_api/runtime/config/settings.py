from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentVariables(BaseSettings):
    """Process-level values read from the environment and an optional .env file.

    These decide where the YAML configuration lives and which environment
    overrides apply; everything else is in config.yaml.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = Field(
        default="development", validation_alias="APP_ENVIRONMENT"
    )
    config_file: str = Field(
        default="config.yaml", validation_alias="CATALOG_CONFIG_FILE"
    )
    log_level: str | None = Field(default=None, validation_alias="LOG_LEVEL")

"""
FILE: dragboard/core/config.py
PURPOSE: Runtime settings loaded from the environment
EXPORTS:
  - Settings (pydantic-settings model)
  - get_settings() -> Settings
DEPENDENCIES:
  - pydantic (Field)
  - pydantic_settings (BaseSettings)
NOTES:
  - Environment variables use the DRAGBOARD_ prefix (e.g. DRAGBOARD_VERBOSE=1)
  - A local .env file is read when present
  - Components take an explicit Settings so tests stay independent of the env
"""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_BOARD_INDEX, DEFAULT_COLUMN_PREFIX

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DRAGBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    new_column_prefix: str = Field(
        default=DEFAULT_COLUMN_PREFIX,
        description="Title prefix for columns created by 'add column'",
    )
    revert_on_cancel: bool = Field(
        default=False,
        description="Restore the pre-drag columns when a drag is cancelled",
    )
    board_index: int = Field(
        default=DEFAULT_BOARD_INDEX,
        description="Board selected after loading a seed file",
    )
    verbose: bool = Field(default=False, description="Enable debug logging")


def get_settings() -> Settings:
    """Build settings from the environment."""
    settings = Settings()
    logger.debug(
        "Loaded settings: prefix=%r revert_on_cancel=%s board_index=%d",
        settings.new_column_prefix,
        settings.revert_on_cancel,
        settings.board_index,
    )
    return settings

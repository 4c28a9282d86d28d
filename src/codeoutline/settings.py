"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the outline pipeline and CLI.

    Values are read from environment variables and from a ``.env`` file
    in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Outline building
    outline_recursive: bool = False  # populate Container.children below top-level units

    # Source reading
    source_encoding: str = "utf-8"
    max_document_size: int = 5_000_000  # characters

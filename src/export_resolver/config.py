"""Configuration management for export_resolver."""

import logging
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class ResolverSettings(BaseSettings):
    """Resolver settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EXPORT_RESOLVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    extensions: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: [".js", ".jsx", ".ts", ".tsx", ".mjs"],
        description="File extensions tried, in order, when locating a module (comma-separated)",
    )
    ignored_sources: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["react"],
        description="Module specifiers that are never followed (comma-separated)",
    )
    max_depth: int = Field(
        default=1000,
        ge=1,
        description="Maximum number of modules on one re-export chain",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("extensions", "ignored_sources", mode="before")
    @classmethod
    def parse_comma_separated(cls, v: str | list[str]) -> list[str]:
        """Parse comma-separated string into list."""
        if isinstance(v, str):
            if not v.strip():
                return []
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: list[str]) -> list[str]:
        """Validate every extension starts with a dot."""
        for ext in v:
            if not ext.startswith("."):
                raise ValueError(f"Invalid extension: {ext}. Extensions must start with '.'")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v


PACKAGE_LOGGER = "export_resolver"


def setup_logging(level: str) -> None:
    """Set the level of the package's loggers.

    Handlers and formatting are left to the application.
    """
    logging.getLogger(PACKAGE_LOGGER).setLevel(getattr(logging, level))

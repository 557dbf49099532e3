import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-wide page settings with validation.

    Values can be overridden through ``PAGES_*`` environment variables or a
    ``.env`` file in the working directory. They are read once at startup
    and treated as read-only while requests are being served.
    """

    # Name of the top-level template invoked for each page
    base_template: str = Field(default="base", min_length=1, description="Entry-point template name")

    # Message shown to the user by Pages.show_error
    bad_request_msg: str = Field(
        default="Invalid request. Please try again later.",
        description="User-facing message attached to error redirects",
    )

    # Query parameter set by Pages.show_error
    error_param: str = Field(default="error_msg", min_length=1, description="Error query parameter name")

    template_dir: Path | None = Field(default=None, description="Directory relative template paths resolve against")

    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Path | None = Field(default=None, description="JSON log file, disabled when unset")

    model_config = SettingsConfigDict(
        env_prefix="PAGES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("base_template", "error_param", mode="after")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure names are not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if v not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance

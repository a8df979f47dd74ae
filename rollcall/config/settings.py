"""
Application settings and configuration management.

Uses Pydantic Settings for validation and environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BotSettings(BaseSettings):
    """
    Discord bot configuration.

    Frozen: the command prefix and default role are fixed for the lifetime of
    the process. Use model_copy(update=...) to derive an overridden copy.
    """

    name: str = Field(default="Rollcall", description="Bot display name")
    command_prefix: str = Field(default="!", description="Command prefix for bot commands")
    default_role: str = Field(
        default="Members",
        description="Role assigned to members once they link a character with !iam. "
                    "Matched against the guild's role names exactly (case-sensitive).",
    )
    token: str = Field(default="", description="Discord bot token")

    model_config = SettingsConfigDict(env_prefix="BOT__", frozen=True)


class Settings(BaseSettings):
    """Main application settings."""

    # Environment
    environment: Literal["development", "production"] = Field(
        default="development", description="Deployment environment"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_file: Path | None = Field(default=None, description="Log file path")

    # Sub-configurations
    bot: BotSettings = Field(default_factory=BotSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    def with_token(self, token: str) -> "Settings":
        """Return a copy of these settings with the bot token replaced."""
        return self.model_copy(update={"bot": self.bot.model_copy(update={"token": token})})


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: str | Path | None = None) -> Settings:
    """
    Load settings from file and environment.

    Args:
        env_file: Path to .env file (optional)

    Returns:
        Loaded settings instance
    """
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings

"""Configuration management using pydantic-settings."""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file from current directory
_env_file = Path.cwd() / ".env"
if _env_file.exists():
    load_dotenv(_env_file)

LOG_LEVELS = ("debug", "info", "warn", "error")


class AppConfig(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="PLAYLIST_FORMATTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_output_dir: Path = Field(
        default=Path.home() / "Documents" / "Playlists",
        description="Directory for saved playlists when --default is given",
    )
    output_suffix: str = Field(
        default="_formatted",
        min_length=1,
        description="Appended to the source file stem for generated output names",
    )
    output_extension: str = Field(default=".txt", description="Extension for generated output names")
    position_origin: int = Field(default=1, ge=0, le=1, description="First track position")
    log_level: str = Field(default="info", description="Default log level")

    @field_validator("default_output_dir")
    @classmethod
    def expand_home(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("output_extension")
    @classmethod
    def leading_dot(cls, value: str) -> str:
        if value and not value.startswith("."):
            return f".{value}"
        return value

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        value = value.lower()
        if value not in LOG_LEVELS:
            raise ValueError(f"log level must be one of: {', '.join(LOG_LEVELS)}")
        return value

    def output_name(self, source: Path) -> str:
        """Generated output file name for a source playlist."""
        return f"{source.stem}{self.output_suffix}{self.output_extension}"


def load_config() -> AppConfig:
    """Load configuration from environment and .env file."""
    return AppConfig()

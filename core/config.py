"""
Application configuration management.

Uses pydantic-settings for type-safe environment variable parsing.
Permission masks, path symbols and application roots are all read here
so the filesystem layer never has to call os.getenv() itself.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from filesystem.policy import parse_mode
from filesystem.symbols import validate_symbols


class Settings(BaseSettings):
    """
    Application settings with validation and type coercion.

    Values are loaded from environment variables or .env file.
    All fields have sensible defaults for local development.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Raw filesystem backend
    # Options: "local", "memory"
    filesystem_backend: Literal["local", "memory"] = "local"

    # Default permission masks as octal strings ("644", "755").
    # Unset or empty means "leave the mode alone"; "000" is a real mask.
    file_permissions: Optional[str] = None
    folder_permissions: Optional[str] = None

    # Path symbols, e.g. PATH_SYMBOLS='{"$": "/srv/app/plugins", "~": "/srv/app"}'
    path_symbols: dict[str, str] = {}

    # Application roots
    base_path: str = "."
    public_path: str = "./public"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    @field_validator("file_permissions", "folder_permissions")
    @classmethod
    def _check_mask(cls, value: Optional[str]) -> Optional[str]:
        parse_mode(value)
        return value

    @field_validator("path_symbols")
    @classmethod
    def _check_symbols(cls, value: dict[str, str]) -> dict[str, str]:
        validate_symbols(value)
        return value

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def file_mode(self) -> Optional[int]:
        """Default file mode as an integer, or None when not configured."""
        return parse_mode(self.file_permissions)

    @property
    def folder_mode(self) -> Optional[int]:
        """Default directory mode as an integer, or None when not configured."""
        return parse_mode(self.folder_permissions)


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings singleton.

    Use this function to get settings instance throughout the application.
    The @lru_cache ensures we only parse environment once.
    """
    return Settings()


# Convenience export for direct import
settings = get_settings()

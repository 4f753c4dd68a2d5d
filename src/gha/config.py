"""Environment configuration for gha.

Uses pydantic-settings for type-safe configuration with a directory-tree
search for .env files, from the current directory up to home.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_WORKFLOWS_DIR = Path(".github/workflows")
DEFAULT_API_URL = "https://api.github.com"


class GhaSettings(BaseSettings):
    """gha settings loaded from the environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    github_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_TOKEN", "GH_TOKEN"),
    )
    api_url: str = Field(default=DEFAULT_API_URL, validation_alias="GHA_API_URL")
    http_timeout: float = Field(default=30.0, validation_alias="GHA_HTTP_TIMEOUT")
    workflows_dir: Path = Field(
        default=DEFAULT_WORKFLOWS_DIR, validation_alias="GHA_WORKFLOWS_DIR"
    )


def find_dotenv(start_path: Path | None = None) -> Path | None:
    """Find .env file by searching up the directory tree.

    Searches from start_path (or cwd) up to the home directory.
    Returns the first .env file found, or None if not found.
    """
    current = (start_path or Path.cwd()).resolve()
    home = Path.home().resolve()

    while current >= home:
        candidate = current / ".env"
        if candidate.exists():
            return candidate
        if current == current.parent:
            break
        current = current.parent

    return None


@lru_cache(maxsize=1)
def get_settings() -> GhaSettings:
    """Get cached GhaSettings instance."""
    env_file = find_dotenv()
    if env_file:
        return GhaSettings(_env_file=env_file)
    return GhaSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache. Useful for testing."""
    get_settings.cache_clear()

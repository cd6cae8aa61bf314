"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseModel):
    """Database configuration."""

    url: str = "sqlite+aiosqlite:///snipforge.db"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # If None, sends when a token is present, otherwise console-only
    send_to_logfire: bool | None = None


class SearchSettings(BaseModel):
    """Fuzzy ranking configuration.

    A field counts as a match when its similarity is at least
    ``1 - fuzzy_threshold``. Weights order the fields by how likely a user
    remembers them: title first, then tags, description and body.
    """

    fuzzy_threshold: float = Field(default=0.4, ge=0.0, le=1.0)
    min_match_char_length: int = Field(default=2, ge=1)
    title_weight: float = Field(default=2.0, gt=0)
    tags_weight: float = Field(default=1.5, gt=0)
    description_weight: float = Field(default=1.0, gt=0)
    body_weight: float = Field(default=0.5, gt=0)


class AutocompleteSettings(BaseModel):
    """Tag autocomplete configuration."""

    separator: str = Field(default=",", min_length=1)
    max_suggestions: int = Field(default=5, ge=1)

    # Keys that never trigger autocomplete (navigation and deletion)
    skip_keys: list[str] = [
        "Backspace",
        "Delete",
        "ArrowLeft",
        "ArrowRight",
        "ArrowUp",
        "ArrowDown",
    ]


class TransferSettings(BaseModel):
    """Export/import configuration.

    The size ceilings guard imports against oversized documents.
    """

    format_version: str = "2.0"
    max_snippets: int = 50_000
    max_title_length: int = 500
    max_body_length: int = 1_000_000
    max_description_length: int = 10_000


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, nested values use ``__``:

        ENVIRONMENT=production
        DATABASE__URL=sqlite+aiosqlite:////var/lib/snipforge/snipforge.db
        SEARCH__FUZZY_THRESHOLD=0.3
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows DATABASE__URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    host: str = "localhost"
    port: int = 8000

    # Origins allowed to call the API from a browser front end
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",  # Vite default
    ]

    # Nested settings
    database: DatabaseSettings = DatabaseSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
    search: SearchSettings = SearchSettings()
    autocomplete: AutocompleteSettings = AutocompleteSettings()
    transfer: TransferSettings = TransferSettings()

    @model_validator(mode="after")
    def load_git_sha(self) -> "Settings":
        """Load git SHA from the version file when one is deployed."""
        if self.git_sha == "unknown":
            self.git_sha = self._load_git_sha()
        return self

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        return "unknown"

    @property
    def database_url(self) -> str:
        """Shortcut for the database URL."""
        return self.database.url

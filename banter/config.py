"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseModel):
    """Database configuration.

    The database backs the local key-value store, so SQLite is the default.
    """

    url: str = "sqlite+aiosqlite:///./banter.db"
    echo: bool = False


class StorageSettings(BaseModel):
    """Key-value storage configuration."""

    # Total bytes the store may hold across all keys.
    # Mirrors the ~5 MiB budget browsers give local storage.
    quota_bytes: int = Field(default=5 * 1024 * 1024, gt=0)


class CommentSettings(BaseModel):
    """Comment thread configuration."""

    # Content cap after trimming
    max_length: int = Field(default=500, gt=0)

    # Author used when none is supplied
    default_author: str = "Anonymous"

    # Content written over a comment when it is deleted
    deleted_marker: str = "{DELETED COMMENT}"

    # Replies are only accepted on comments shallower than this depth
    max_reply_depth: int = Field(default=6, ge=0)

    # Ordering used when neither the request nor the topic preference sets one
    default_sort: Literal["new", "old", "top"] = "new"


class CacheSettings(BaseModel):
    """Topic state cache configuration."""

    # Seconds a cached topic state stays fresh before storage is re-read
    ttl_seconds: float = Field(default=30.0, ge=0)


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        DATABASE__URL=sqlite+aiosqlite:////var/lib/banter/banter.db
        COMMENTS__MAX_LENGTH=1000
        CACHE__TTL_SECONDS=5
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

    # Origins allowed to call the local API (the chat frontend)
    cors_origins: list[str] = ["http://localhost:3000"]

    # Nested settings
    database: DatabaseSettings = DatabaseSettings()
    storage: StorageSettings = StorageSettings()
    comments: CommentSettings = CommentSettings()
    cache: CacheSettings = CacheSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def load_version(self) -> "Settings":
        """Load git SHA from the version file when present."""
        self.git_sha = self._load_git_sha(self.git_sha)
        return self

    @staticmethod
    def _load_git_sha(default: str) -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise the configured default
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return default
        # In development, version file may not exist
        return default

    @property
    def database_url(self) -> str:
        """Shortcut for the database URL."""
        return self.database.url

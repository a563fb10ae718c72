"""Application settings and configuration."""

from functools import lru_cache
from typing import ClassVar

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Facts API", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    host: str = Field(default="0.0.0.0", description="Host to bind to")
    port: int = Field(default=8000, description="Port to bind to")
    api_prefix: str = Field(
        default="", description="Prefix the facts router is mounted under"
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    expose_error_details: bool = Field(
        default=True,
        description="Return upstream failure messages in 500 response bodies",
    )

    # CORS
    allowed_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )

    # Row store (hosted PostgreSQL)
    database_url_override: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "database_url"),
        description="Full database URL; takes precedence over POSTGRES_* settings",
    )
    postgres_user: str = Field(default="postgres", description="PostgreSQL user")
    postgres_password: str = Field(
        default="postgres", description="PostgreSQL password"
    )
    postgres_host: str = Field(default="localhost", description="PostgreSQL host")
    postgres_port: int = Field(default=5432, description="PostgreSQL port")
    postgres_db: str = Field(default="postgres", description="PostgreSQL database")
    database_pool_size: int = Field(
        default=5, description="SQLAlchemy connection pool size"
    )

    # Completion service
    openai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "OPENAI_KEY"),
        description="API key for the OpenAI completion endpoint",
    )
    completion_model: str = Field(
        default="gpt-3.5-turbo-instruct",
        description="Completion model used to extract facts",
    )
    completion_timeout_seconds: float = Field(
        default=60.0, description="Request timeout for the completion call"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("api_prefix")
    @classmethod
    def normalize_api_prefix(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if value and not value.startswith("/"):
            value = f"/{value}"
        return value

    # Database URL (computed property)
    @property
    def database_url(self) -> str:
        """Database URL in the asyncpg driver form."""
        if self.database_url_override:
            return to_async_database_url(self.database_url_override)
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


def to_async_database_url(url: str) -> str:
    """Rewrite a plain Postgres URL (as handed out by hosted providers) for asyncpg."""
    for scheme in ("postgresql+asyncpg://", "postgres://", "postgresql://"):
        if url.startswith(scheme):
            return "postgresql+asyncpg://" + url[len(scheme) :]
    return url


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()

"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

DB_POOL_SIZE_DEFAULT = 5
DB_MAX_OVERFLOW_DEFAULT = 10
DB_PORT_DEFAULT = 5432


class DatabaseSettings(BaseSettings):
    """Resume store connection settings.

    PostgreSQL by default; setting ``sqlite_path`` switches to a local file.
    """

    model_config = SettingsConfigDict(env_prefix="RESUME_DB_")

    host: str = "localhost"
    port: int = DB_PORT_DEFAULT
    user: str = "resume"
    password: str = "resume"
    database: str = "resume"
    pool_size: int = DB_POOL_SIZE_DEFAULT
    max_overflow: int = DB_MAX_OVERFLOW_DEFAULT
    sqlite_path: str = ""
    bootstrap: bool = True

    @property
    def is_sqlite(self) -> bool:
        """Whether the store is a local SQLite file."""
        return bool(self.sqlite_path)

    @property
    def async_url(self) -> str:
        """Build the async connection URL."""
        if self.is_sqlite:
            return f"sqlite+aiosqlite:///{self.sqlite_path}"
        return (
            f"postgresql+asyncpg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )


class AuthSettings(BaseSettings):
    """Bearer-token validation settings."""

    model_config = SettingsConfigDict(env_prefix="RESUME_AUTH_")

    jwks_url: str = "http://localhost:8000/oauth/jwks"
    issuer: str = "http://localhost:8000"
    audience: str = "resume-api"
    health_path: str = "/health"


class LogSettings(BaseSettings):
    """Log output settings."""

    model_config = SettingsConfigDict(env_prefix="RESUME_LOG_")

    level: str = "info"
    json_output: bool = True

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    PROJECT_NAME: str = "Laptop inventory API"

    HOST: str = "0.0.0.0"
    PORT: int = 6001
    CORS_ALLOW_ORIGIN: str = "http://localhost:5173"

    POSTGRES_SERVER: str = "postgres"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "laptops"

    DATABASE_URL: str | None = None

    LOG_LEVEL: str = "INFO"
    SQLALCHEMY_LOG_LEVEL: str = "WARNING"
    UVICORN_ACCESS_LOG: bool = False
    REQUEST_LOGS_ENABLED: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True)

    @property
    def sqlalchemy_database_uri(self) -> str:
        """Build the SQLAlchemy database URI.

        Plain libpq-style URLs (``postgres://`` / ``postgresql://``) are pointed at
        the asyncpg driver; anything already naming a driver is used as given.
        """
        if self.DATABASE_URL is not None:
            url = str(self.DATABASE_URL)
            for scheme in ("postgres://", "postgresql://"):
                if url.startswith(scheme):
                    return "postgresql+asyncpg://" + url[len(scheme):]
            return url
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_SERVER}/{self.POSTGRES_DB}"
        )


@lru_cache()
def get_settings() -> Settings:  # pragma: no cover
    """Return cached settings object to avoid re-parsing env vars."""
    return Settings()

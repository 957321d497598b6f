"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded in deployments)
    - Settings are immutable once loaded (frozen model)
    - get_settings() is cached (lru_cache) — used only by entry points (CLI, alembic)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Database URL assembled from parts with sqlalchemy URL.create: passwords with
      reserved characters are escaped correctly
    - The app factory receives Settings explicitly (no ambient global lookups in handlers)
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, frozen=True,
    )

    # Application
    application_host: str = "127.0.0.1"
    application_port: int = 8000

    # Database
    database_host: str = "localhost"
    database_port: int = 5432
    database_username: str = "postgres"
    database_password: str = "password"
    database_name: str = "newsletter"
    database_pool_size: int = 10
    database_max_overflow: int = 5
    database_timeout_seconds: float = 2.0
    run_migrations_on_startup: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def database_url(self) -> str:
        return self._url(self.database_name)

    def _url(self, database: str) -> str:
        return URL.create(
            "postgresql+asyncpg",
            username=self.database_username,
            password=self.database_password,
            host=self.database_host,
            port=self.database_port,
            database=database,
        ).render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()

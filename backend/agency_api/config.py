"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Credentials come from environment variables or .env, never from handler code
    - get_settings() is cached (lru_cache) - single instance per process
    - database_url always carries an async driver scheme

Design Decisions:
    - DATABASE_URL wins when set; otherwise the URL is assembled from DB_* parts
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

_ASYNC_SCHEMES = {
    "mysql://": "mysql+aiomysql://",
    "mariadb://": "mysql+aiomysql://",
    "mysql+pymysql://": "mysql+aiomysql://",
}


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "Agency API"
    app_version: str = "1.0.0"
    app_description: str = "Customer and agent records backed by MariaDB"

    # Database
    db_host: str = "localhost"
    db_port: int = 3306
    db_user: str = "root"
    db_password: str = "root"
    db_name: str = "sample"
    database_url: str | None = None

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_sync_url(cls, v: str | None) -> str | None:
        """Rewrite sync MySQL/MariaDB schemes to the aiomysql driver."""
        if isinstance(v, str):
            for prefix, replacement in _ASYNC_SCHEMES.items():
                if v.startswith(prefix):
                    return v.replace(prefix, replacement, 1)
        return v

    @model_validator(mode="after")
    def assemble_database_url(self):
        if not self.database_url:
            self.database_url = URL.create(
                "mysql+aiomysql",
                username=self.db_user,
                password=self.db_password,
                host=self.db_host,
                port=self.db_port,
                database=self.db_name,
            ).render_as_string(hide_password=False)
        return self

    database_pool_size: int = 5
    database_max_overflow: int = 0

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()

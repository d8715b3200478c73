"""Runtime settings for the Karaworks API.

Values come from the environment (or ``.env``), with nested sections addressed
by a double underscore, e.g. ``DATABASE__URL`` or ``SECURITY__SECRET_KEY``.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_SECRET_KEY = "karaworks-dev-secret"


class ServerSettings(BaseModel):
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


class DatabaseSettings(BaseModel):
    url: str = "sqlite+aiosqlite:///./karaworks.db"
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None
    # seconds a SQLite writer waits for a concurrent finish to release the lock
    sqlite_busy_timeout: float = 30.0


class SecuritySettings(BaseModel):
    secret_key: str = Field(default=DEV_SECRET_KEY, min_length=16)
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 30


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Karaworks API"
    api_prefix: str = "/api"

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    security: SecuritySettings = SecuritySettings()
    logging: LoggingSettings = LoggingSettings()

    @model_validator(mode="after")
    def _require_real_secret(self) -> "Settings":
        if self.environment in ("staging", "production") and self.security.secret_key == DEV_SECRET_KEY:
            raise ValueError("SECURITY__SECRET_KEY must be set outside development")
        return self

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def secret_key(self) -> str:
        return self.security.secret_key

    @property
    def algorithm(self) -> str:
        return self.security.algorithm

    @property
    def access_token_expire_minutes(self) -> int:
        return self.security.access_token_expire_minutes


@lru_cache()
def get_settings() -> Settings:
    return Settings()

from __future__ import annotations

import json
import os
import urllib.parse
from functools import lru_cache
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Load project-root .env early so both pydantic-settings and any direct os.getenv access
# see consistent values, even if the process CWD is not the repo root.
_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_IN_TEST = (os.getenv("ENVIRONMENT") or "").lower() == "test" or bool(os.getenv("PYTEST_CURRENT_TEST"))
if _ENV_PATH.exists() and not _IN_TEST:
    load_dotenv(dotenv_path=_ENV_PATH, override=True)


def _parse_origins(raw: Any) -> list[str]:
    if raw is None:
        return []

    if isinstance(raw, (list, tuple, set)):
        items = list(raw)
    elif isinstance(raw, str):
        s = raw.strip()
        if not s:
            return []

        # Support JSON array string or comma-separated string.
        if s.startswith("["):
            try:
                parsed = json.loads(s)
                items = parsed if isinstance(parsed, list) else [parsed]
            except ValueError:
                items = [p.strip() for p in s.split(",")]
        else:
            items = [p.strip() for p in s.split(",")]
    else:
        items = [raw]

    return [str(item).strip() for item in items if item is not None and str(item).strip()]


class Settings(BaseSettings):
    app_name: str = Field(default="Jobly")
    version: str = Field(default="0.1.0")
    environment: str = Field(default="development")
    debug: bool = Field(default=True)

    # DB_URL wins when set; otherwise discrete DB_* values build a PostgreSQL URL.
    db_url: str | None = Field(default=None, validation_alias="DB_URL")
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=5432, validation_alias="DB_PORT")
    db_name: str = Field(default="jobly", validation_alias="DB_NAME")
    db_user: str = Field(default="postgres", validation_alias="DB_USER")
    db_password: str = Field(default="", validation_alias="DB_PASSWORD")
    db_use_postgres: bool = Field(default=False, validation_alias="DB_USE_POSTGRES")

    jwt_secret: str = Field(default="secret-dev", validation_alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=60)

    # bcrypt cost; tests lower it to keep hashing fast.
    bcrypt_work_factor: int = Field(default=12, validation_alias="BCRYPT_WORK_FACTOR")

    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
        validation_alias="CORS_ORIGINS",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> list[str]:
        return _parse_origins(v)

    @field_validator("bcrypt_work_factor")
    @classmethod
    def _validate_work_factor(cls, v: int) -> int:
        # bcrypt accepts log rounds in [4, 31].
        if v < 4 or v > 31:
            raise ValueError("BCRYPT_WORK_FACTOR must be between 4 and 31")
        return v

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


def build_sqlalchemy_db_url(settings: Settings) -> str:
    if settings.db_url:
        return settings.db_url

    # In development, default to sqlite unless PostgreSQL is explicitly requested.
    if settings.environment.lower() in {"development", "test"} and not settings.db_use_postgres:
        return "sqlite:///./jobly_dev.db"

    # Encode password only if it exists
    password = f":{urllib.parse.quote_plus(settings.db_password)}" if settings.db_password else ""
    return (
        f"postgresql+psycopg2://{settings.db_user}{password}"
        f"@{settings.db_host}:{settings.db_port}/{settings.db_name}"
    )


def is_sqlite_url(db_url: str) -> bool:
    return db_url.startswith("sqlite")

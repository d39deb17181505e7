"""Configuration for Taskboard.

Settings come from environment variables, with a local .env file loaded
first when present.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    database_url: str = "sqlite:///./taskboard.db"
    host: str = "0.0.0.0"
    port: int = 3004
    log_level: str = "INFO"
    sql_echo: bool = False
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings(
        database_url=os.getenv("DATABASE_URL", "sqlite:///./taskboard.db"),
        host=os.getenv("TASKBOARD_HOST", "0.0.0.0"),
        port=_env_int("TASKBOARD_PORT", 3004),
        log_level=os.getenv("TASKBOARD_LOG_LEVEL", "INFO").upper(),
        sql_echo=_env_bool("TASKBOARD_SQL_ECHO", False),
        cors_origins=_env_list("TASKBOARD_CORS_ORIGINS", "*"),
    )

"""Settings loaded from .env and environment variables."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite:///agenda.db"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Repo root: src/agenda/infrastructure/config.py -> four levels up
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent.parent


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    sql_echo: bool = False
    log_level: str = "INFO"


def _load_env_file() -> None:
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    """Read AGENDA_* variables. Values already in the environment win over .env."""
    _load_env_file()
    return Settings(
        database_url=os.environ.get("AGENDA_DATABASE_URL", "").strip() or DEFAULT_DATABASE_URL,
        sql_echo=_env_flag("AGENDA_SQL_ECHO"),
        log_level=os.environ.get("AGENDA_LOG_LEVEL", "").strip().upper() or "INFO",
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level)

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the working directory so local overrides are picked up
load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    value = os.environ.get(name)
    return default if value is None or value.strip() == "" else value.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


class Config:
    DATABASE_PATH = _env_path("DATABASE_PATH", Path("data") / "tasks.db")
    STATIC_DIR = _env_path("STATIC_DIR", Path("static"))
    HISTORY_LIMIT = _env_int("HISTORY_LIMIT", 50)

    HOST = _env("HOST", "0.0.0.0")
    PORT = _env_int("PORT", 8080)

    LOG_LEVEL = _env("LOG_LEVEL", "INFO").upper()
    LOG_DIR = _env("LOG_DIR") or None

    DEBUG = _env_bool("FLASK_DEBUG", False)

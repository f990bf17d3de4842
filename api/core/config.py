"""
Environment-driven settings.

Values are read at call time so tests (and process managers) can change them
without re-importing modules.
"""

from __future__ import annotations

import os


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def database_path() -> str:
    return _env_str("DATABASE_PATH", "blog.db")


def database_timeout_s() -> float:
    # How long a writer waits on SQLite's lock before giving up.
    return _env_float("DATABASE_TIMEOUT_S", 5.0)


def cors_allow_origins() -> list[str]:
    raw = _env_str("CORS_ALLOW_ORIGINS", "*")
    origins = [item.strip() for item in raw.split(",") if item.strip()]
    return origins or ["*"]


def api_prefix() -> str:
    prefix = _env_str("API_PREFIX", "/api").rstrip("/")
    if prefix and not prefix.startswith("/"):
        prefix = "/" + prefix
    return prefix


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()

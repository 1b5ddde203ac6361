"""
Environment-driven settings.

Every option has a default so the service starts in a local dev setup with
no environment at all. `DATABASE_URL`, when set, wins over the POSTGRES_*
parts.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _env_log_level(name: str, default: str) -> str:
    level = _env_str(name, default).upper()
    return level if level in LOG_LEVELS else default


def _sanitize_database_url(url: str) -> str:
    # asyncpg rejects libpq-only options such as sslmode.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


@dataclass(frozen=True)
class Settings:
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "restaurant_db"
    database_url_override: str = ""

    host: str = "0.0.0.0"
    port: int = 4000

    pool_max_size: int = 10
    connect_attempts: int = 15
    connect_delay_ms: int = 2000
    acquire_timeout_s: float = 10.0
    query_timeout_s: float = 30.0

    log_level: str = "INFO"

    def database_url(self) -> str:
        if self.database_url_override:
            return _sanitize_database_url(self.database_url_override)
        user = quote(self.db_user, safe="")
        password = quote(self.db_password, safe="")
        return f"postgresql://{user}:{password}@{self.db_host}:{self.db_port}/{self.db_name}"


def load_settings() -> Settings:
    return Settings(
        db_user=_env_str("POSTGRES_USER", "postgres"),
        db_password=os.environ.get("POSTGRES_PASSWORD", "postgres"),
        db_host=_env_str("POSTGRES_HOST", "localhost"),
        db_port=_env_int("POSTGRES_PORT", 5432),
        db_name=_env_str("RESTAURANT_DB", "restaurant_db"),
        database_url_override=os.environ.get("DATABASE_URL", "").strip(),
        host=_env_str("HOST", "0.0.0.0"),
        port=_env_int("PORT", 4000),
        pool_max_size=max(1, _env_int("DB_POOL_MAX", 10)),
        connect_attempts=max(1, _env_int("DB_CONNECT_ATTEMPTS", 15)),
        connect_delay_ms=max(0, _env_int("DB_CONNECT_DELAY_MS", 2000)),
        acquire_timeout_s=_env_float("DB_ACQUIRE_TIMEOUT_S", 10.0),
        query_timeout_s=_env_float("DB_QUERY_TIMEOUT_S", 30.0),
        log_level=_env_log_level("LOG_LEVEL", "INFO"),
    )

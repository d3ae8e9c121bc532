from __future__ import annotations

import os

DEFAULT_API_BASE_URL = "http://localhost:5000"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5173
DEFAULT_CATALOG_LIMIT = 100


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)

    if raw is None or raw.strip() == "":
        return default

    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} environment variable must be an integer, got {raw!r}")


def api_base_url() -> str:
    return os.getenv("CAR_COMPARE_API_BASE_URL") or DEFAULT_API_BASE_URL


def catalog_limit() -> int:
    return _int_env("CAR_COMPARE_CATALOG_LIMIT", DEFAULT_CATALOG_LIMIT)


def server_host() -> str:
    return os.getenv("CAR_COMPARE_HOST") or DEFAULT_HOST


def server_port() -> int:
    return _int_env("CAR_COMPARE_PORT", DEFAULT_PORT)


def log_level() -> str:
    return (os.getenv("CAR_COMPARE_LOG_LEVEL") or "INFO").upper()

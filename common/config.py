"""Environment-driven settings, read at call time."""

import os

DEFAULT_API_URL = "https://openrouter.ai/api/v1/models"
DEFAULT_CACHE_TTL_SECONDS = 3600  # 1 hour
DEFAULT_ADMIN_USERNAME = "admin"


def api_url() -> str:
    return os.environ.get("OPENROUTER_API_URL") or DEFAULT_API_URL


def cache_ttl_seconds() -> float:
    value = os.environ.get("CACHE_TTL_SECONDS")
    return float(value) if value else DEFAULT_CACHE_TTL_SECONDS


def upstream_timeout():
    """Seconds for the upstream request, or None for the transport default."""
    value = os.environ.get("UPSTREAM_TIMEOUT_SECONDS")
    return float(value) if value else None


def admin_username() -> str:
    return os.environ.get("ADMIN_USERNAME") or DEFAULT_ADMIN_USERNAME


def admin_password_env():
    return os.environ.get("ADMIN_PASSWORD") or None


def admin_secret_name():
    return os.environ.get("ADMIN_SECRET_NAME") or None


def default_models_env():
    return os.environ.get("DEFAULT_MODELS")

"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. Call get_settings() from entrypoints
(gui, tests) so .env is respected.
"""

import os
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv


# Load .env once at import time
load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    # Hosted record store (PostgREST / Supabase)
    store_url: Optional[str] = field(default_factory=lambda: os.getenv("SUPABASE_URL"))
    store_key: Optional[str] = field(default_factory=lambda: os.getenv("SUPABASE_ANON_KEY"))
    table_name: str = field(default_factory=lambda: os.getenv("BIZDIR_TABLE", "businesses"))
    order_by: Optional[str] = field(default_factory=lambda: os.getenv("BIZDIR_ORDER_BY") or None)
    echo_inserts: bool = field(default_factory=lambda: _flag("BIZDIR_ECHO_INSERTS", "1"))
    http_timeout: Optional[float] = field(
        default_factory=lambda: _optional_float("BIZDIR_HTTP_TIMEOUT")
    )

    # Address autocomplete ("nominatim" or unset)
    autocomplete_provider: Optional[str] = field(
        default_factory=lambda: os.getenv("BIZDIR_AUTOCOMPLETE") or None
    )

    # Persisted preferences live in the project .env
    env_path: str = field(
        default_factory=lambda: os.getenv("BIZDIR_ENV_PATH", os.path.join(PROJECT_ROOT, ".env"))
    )

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("BIZDIR_LOG_LEVEL", "INFO"))

    @property
    def store_configured(self) -> bool:
        return bool((self.store_url or "").strip() and (self.store_key or "").strip())


def get_settings() -> Settings:
    """Return a new Settings instance (cheap dataclass construction)."""
    return Settings()

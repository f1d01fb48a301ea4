from . import clients, settings_service  # noqa: F401

from .clients import get_autocomplete_provider, get_store_client
from .settings_service import (
    THEME_KEY,
    detect_system_theme,
    load_theme,
    save_settings,
    save_theme,
)

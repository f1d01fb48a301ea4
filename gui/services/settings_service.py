import os
import subprocess
import sys
from pathlib import Path
from typing import Callable, Optional

from dotenv import dotenv_values, set_key

from bizdir.utils.logger import get_logger

logger = get_logger(__name__)

ENV_PATH = Path(__file__).resolve().parents[2] / '.env'
THEME_KEY = "BIZDIR_THEME"
THEMES = ("light", "dark")


def save_settings(values: dict, env_path: Optional[Path] = None):
    path = Path(env_path or ENV_PATH)
    path.touch(exist_ok=True)
    for key, value in values.items():
        os.environ[key] = value
        set_key(str(path), key, value)
    logger.info("Saved %d settings to %s", len(values), path.name)


def detect_system_theme() -> str:
    """Return the OS light/dark preference, defaulting to light."""
    try:
        if sys.platform == "darwin":
            result = subprocess.run(
                ["defaults", "read", "-g", "AppleInterfaceStyle"],
                capture_output=True, text=True, timeout=2,
            )
            return "dark" if "dark" in result.stdout.lower() else "light"
        if sys.platform.startswith("win"):
            import winreg

            with winreg.OpenKey(
                winreg.HKEY_CURRENT_USER,
                r"Software\Microsoft\Windows\CurrentVersion\Themes\Personalize",
            ) as key:
                value, _ = winreg.QueryValueEx(key, "AppsUseLightTheme")
            return "light" if value else "dark"
    except (OSError, subprocess.SubprocessError):
        return "light"
    return "dark" if "dark" in os.getenv("GTK_THEME", "").lower() else "light"


def load_theme(
    env_path: Optional[Path] = None,
    system_theme: Callable[[], str] = detect_system_theme,
) -> str:
    path = Path(env_path or ENV_PATH)
    stored = dotenv_values(path).get(THEME_KEY) if path.exists() else None
    stored = (stored or os.getenv(THEME_KEY) or "").strip().lower()
    if stored in THEMES:
        return stored
    fallback = system_theme()
    return fallback if fallback in THEMES else "light"


def save_theme(theme: str, env_path: Optional[Path] = None) -> str:
    if theme not in THEMES:
        raise ValueError(f"Unknown theme: {theme!r}")
    save_settings({THEME_KEY: theme}, env_path=env_path)
    return theme

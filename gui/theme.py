"""Theme primitives for the directory GUI.

Two palettes, light and dark. `apply_theme` pushes a palette into ttk styles.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Base theme definition (light)."""

    name: str = "light"
    primary_color: str = "#1f2937"  # slate-800
    muted_color: str = "#6b7280"  # gray-500
    accent_color: str = "#3b82f6"  # blue-500
    background_color: str = "#ffffff"
    surface_color: str = "#f3f4f6"  # gray-100
    badge_color: str = "#dbeafe"  # blue-100
    error_color: str = "#dc2626"  # red-600
    success_color: str = "#16a34a"  # green-600


@dataclass(frozen=True)
class DarkTheme(Theme):
    name: str = "dark"
    background_color: str = "#0b1220"
    surface_color: str = "#1e293b"  # slate-800
    primary_color: str = "#e5e7eb"  # gray-200
    muted_color: str = "#94a3b8"  # slate-400
    accent_color: str = "#22c55e"  # green-500
    badge_color: str = "#334155"  # slate-700
    error_color: str = "#f87171"  # red-400
    success_color: str = "#4ade80"  # green-400


THEMES = {"light": Theme(), "dark": DarkTheme()}


def get_theme(name: str) -> Theme:
    return THEMES.get(name, THEMES["light"])


def apply_theme(style, root, theme: Theme) -> None:
    """Configure ttk styles used by the views."""
    bg, fg = theme.background_color, theme.primary_color
    style.configure("TFrame", background=bg)
    style.configure("Main.TFrame", background=bg)
    style.configure("Panel.TFrame", background=theme.surface_color)
    style.configure("Card.TFrame", background=theme.surface_color, relief="flat")
    style.configure("TLabel", background=bg, foreground=fg)
    style.configure("Header.TLabel", background=bg, foreground=fg, font=("Inter", 16, "bold"))
    style.configure("Muted.TLabel", background=bg, foreground=theme.muted_color)
    style.configure("CardTitle.TLabel", background=theme.surface_color, foreground=fg,
                    font=("Inter", 12, "bold"))
    style.configure("CardBody.TLabel", background=theme.surface_color, foreground=fg)
    style.configure("CardMuted.TLabel", background=theme.surface_color, foreground=theme.muted_color)
    style.configure("Badge.TLabel", background=theme.badge_color, foreground=fg, padding=(6, 1))
    style.configure("Status.TLabel", background=theme.surface_color, foreground=theme.muted_color)
    style.configure("StatusError.TLabel", background=theme.surface_color, foreground=theme.error_color)
    style.configure("StatusSuccess.TLabel", background=theme.surface_color, foreground=theme.success_color)
    style.configure("TButton", padding=6)
    style.configure("Accent.TButton", background=theme.accent_color)
    root.configure(bg=bg)

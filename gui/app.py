"""Main GUI application object.

Builds the Tk window, wires the DirectoryController to the widgets and drives
the asyncio loop from Tk's main loop.
"""

from __future__ import annotations

import tkinter as tk
from datetime import date
from pathlib import Path
from tkinter import messagebox, ttk
from typing import Optional

from bizdir.config import Settings, get_settings
from bizdir.utils.logger import get_logger, setup_logging
from gui.components.detail_popover import DetailPopover
from gui.components.status_bar import StatusBar
from gui.controller import DirectoryController, Events
from gui.rendering import DirectoryView as DirectoryModel
from gui.services import settings_service
from gui.services.clients import get_autocomplete_provider, get_store_client
from gui.state import PopoverState
from gui.theme import apply_theme, get_theme
from gui.utils.async_tasks import TkAsyncioPump
from gui.views.directory import DirectoryView

logger = get_logger(__name__)


class DirectoryApp:
    """Business directory window."""

    def __init__(
        self,
        root: tk.Tk,
        settings: Optional[Settings] = None,
        controller: Optional[DirectoryController] = None,
    ):
        self.root = root
        self.settings = settings or get_settings()
        self.env_path = Path(self.settings.env_path)
        self.root.title("Business Directory")
        self.root.geometry("960x720")
        self.root.minsize(640, 480)

        self.style = ttk.Style()
        self.style.theme_use("clam")

        self.controller = controller or DirectoryController(
            get_store_client(self.settings),
            autocomplete=get_autocomplete_provider(self.settings),
            notifier=self._notify,
        )
        self.controller.state.theme = settings_service.load_theme(self.env_path)
        self.pump = TkAsyncioPump(root)

        # Build UI
        self.status_bar = StatusBar(self.root, self.controller.status)
        self.status_bar.pack(fill=tk.X, side=tk.BOTTOM)

        shell = ttk.Frame(self.root, style="Main.TFrame", padding=12)
        shell.pack(fill=tk.BOTH, expand=True)
        ttk.Label(shell, text=f"© {date.today().year} Business Directory", style="Muted.TLabel").pack(
            side=tk.BOTTOM, anchor="e", pady=(6, 0)
        )
        self.view = DirectoryView(shell, suggest_enabled=self.controller.autocomplete is not None)
        self.view.pack(fill=tk.BOTH, expand=True)

        self.popover = DetailPopover(self.root, on_dismiss=self.controller.close_popover)
        self.view.on_scroll = self.popover.reposition

        self.controller.add_render_listener(self._on_render)
        self.controller.add_form_listener(self.view.sync_form)
        self.controller.add_popover_listener(self._on_popover)
        self.controller.register(self.view, self.pump.spawn)
        self.view.connect(Events.TOGGLE_THEME, self.toggle_theme)

        self._apply_theme()

    def run(self) -> None:
        """Start the pump, kick off the initial load and enter Tk's main loop."""
        self.root.protocol("WM_DELETE_WINDOW", self.close)
        self.pump.start()
        self.pump.spawn(self.controller.initialize())
        self.root.mainloop()

    def close(self) -> None:
        self.popover.hide()
        self.pump.stop()
        self.root.destroy()

    def toggle_theme(self) -> None:
        state = self.controller.state
        next_theme = "light" if state.theme == "dark" else "dark"
        try:
            settings_service.save_theme(next_theme, env_path=self.env_path)
        except OSError as exc:
            self.controller.status.error(f"Could not save theme preference: {exc}")
        state.theme = next_theme
        self._apply_theme()

    def _apply_theme(self) -> None:
        theme = get_theme(self.controller.state.theme)
        apply_theme(self.style, self.root, theme)
        self.view.canvas.configure(bg=theme.background_color)

    def _notify(self, message: str) -> None:
        messagebox.showwarning("Missing information", message, parent=self.root)

    def _on_render(self, model: DirectoryModel) -> None:
        self.view.show(model)
        self.status_bar.set_counts(len(model.cards), len(self.controller.state.cache))

    def _on_popover(self, popover: PopoverState) -> None:
        if not popover.visible or popover.business is None:
            self.popover.hide()
            return
        anchor = self.view.card_widget(popover.anchor_index)
        if anchor is None:
            self.controller.close_popover()
            return
        self.popover.show(anchor, popover.business)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Starting Business Directory")
    root = tk.Tk()
    DirectoryApp(root, settings=settings).run()


if __name__ == "__main__":
    main()

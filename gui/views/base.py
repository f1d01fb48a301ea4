"""Base class for GUI views.

Views are ttk frames that double as the controller's event source: the
controller `connect`s handlers by event name and widgets `call` them.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Any, Callable, Dict, List

from bizdir.utils.logger import get_logger

logger = get_logger(__name__)


class BaseView(ttk.Frame):
    name = "base"

    def __init__(self, parent: tk.Misc, **kwargs: Any):
        super().__init__(parent, style="Main.TFrame", **kwargs)
        self._handlers: Dict[str, List[Callable[..., Any]]] = {}
        self._build()

    def _build(self) -> None:
        """Create child widgets."""

    def connect(self, event: str, handler: Callable[..., Any]) -> None:
        self._handlers.setdefault(event, []).append(handler)

    def call(self, event: str, *args: Any) -> None:
        handlers = self._handlers.get(event)
        if not handlers:
            logger.debug("No handler connected for %s", event)
            return
        for handler in list(handlers):
            handler(*args)

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from bizdir.models import Business
from gui.rendering import NO_DESCRIPTION
from gui.utils.geometry import Rect, place_popover


def widget_rect(widget: tk.Misc) -> Rect:
    return Rect(widget.winfo_rootx(), widget.winfo_rooty(), widget.winfo_width(), widget.winfo_height())


class DetailPopover:
    """Borderless detail window anchored below a business card.

    Usage:
        popover = DetailPopover(root, on_dismiss=controller.close_popover)
        popover.show(card_widget, business)
    """

    def __init__(self, root: tk.Tk, on_dismiss: Callable[[], None], width: int = 320):
        self.root = root
        self.on_dismiss = on_dismiss
        self.width = width
        self.window: Optional[tk.Toplevel] = None
        self.anchor: Optional[tk.Widget] = None
        self.root.bind("<Configure>", self._on_viewport_change, add="+")
        self.root.bind("<Escape>", self._dismiss, add="+")
        self.root.bind_all("<Button-1>", self._on_click, add="+")

    @property
    def is_open(self) -> bool:
        return self.window is not None

    def show(self, anchor: tk.Widget, business: Business) -> None:
        self.hide()
        self.anchor = anchor
        self.window = tw = tk.Toplevel(self.root)
        tw.wm_overrideredirect(True)
        tw.transient(self.root)
        tw.bind("<Escape>", self._dismiss)

        body = ttk.Frame(tw, style="Card.TFrame", padding=10)
        body.pack(fill=tk.BOTH, expand=True)

        header = ttk.Frame(body, style="Card.TFrame")
        header.pack(fill=tk.X)
        ttk.Label(header, text=business.name, style="CardTitle.TLabel",
                  wraplength=self.width - 60).pack(side=tk.LEFT, anchor="w")
        ttk.Button(header, text="✕", width=3, command=self._dismiss).pack(side=tk.RIGHT)

        meta = ttk.Frame(body, style="Card.TFrame")
        meta.pack(fill=tk.X, pady=(6, 4))
        for text in (business.category, business.location):
            ttk.Label(meta, text=text, style="Badge.TLabel").pack(side=tk.LEFT, padx=(0, 4))

        ttk.Label(body, text=business.description or NO_DESCRIPTION, style="CardBody.TLabel",
                  wraplength=self.width - 20, justify=tk.LEFT).pack(anchor="w")
        if business.id is not None:
            ttk.Label(body, text=f"ID {business.id}", style="CardMuted.TLabel").pack(anchor="w", pady=(6, 0))

        self.reposition()
        tw.focus_set()

    def reposition(self) -> None:
        """Recompute placement; call on scroll or resize while open."""
        if self.window is None or self.anchor is None:
            return
        if not self.anchor.winfo_exists():
            self._dismiss()
            return
        self.window.update_idletasks()
        size = (max(self.width, self.window.winfo_reqwidth()), self.window.winfo_reqheight())
        x, y = place_popover(widget_rect(self.anchor), size, widget_rect(self.root))
        self.window.wm_geometry(f"{size[0]}x{size[1]}+{x}+{y}")

    def hide(self) -> None:
        tw = self.window
        self.window = None
        self.anchor = None
        if tw is not None:
            tw.destroy()

    def _dismiss(self, _event=None):
        if self.window is not None:
            self.on_dismiss()

    def _on_viewport_change(self, event):
        if event.widget is self.root:
            self.reposition()

    def _on_click(self, event):
        if self.window is None:
            return
        if self._is_inside(event.widget, self.window) or self._is_inside(event.widget, self.anchor):
            return
        self._dismiss()

    @staticmethod
    def _is_inside(widget, container) -> bool:
        while widget is not None and container is not None:
            if widget is container:
                return True
            widget = getattr(widget, "master", None)
        return False

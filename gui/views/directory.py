import tkinter as tk
from tkinter import ttk
from typing import List

from gui.components.business_form import BusinessForm
from gui.controller import Events
from gui.rendering import EMPTY_STATE_TEXT, BusinessCard, DirectoryView as DirectoryModel
from gui.state import FormState
from gui.views.base import BaseView


class DirectoryView(BaseView):
    name = "directory"

    def __init__(self, parent, suggest_enabled: bool = False):
        self.suggest_enabled = suggest_enabled
        self.card_widgets: List[ttk.Frame] = []
        super().__init__(parent)

    def _build(self):
        # ─────────────────────────────────────────────────────────────
        # TOP: title + actions
        # ─────────────────────────────────────────────────────────────
        top = ttk.Frame(self, style="Main.TFrame")
        top.pack(fill=tk.X, pady=(0, 6))

        heading = ttk.Frame(top, style="Main.TFrame")
        heading.pack(side=tk.LEFT)
        ttk.Label(heading, text="Business Directory", style="Header.TLabel").pack(anchor="w")
        ttk.Label(heading, text="Find local businesses or add your own",
                  style="Muted.TLabel").pack(anchor="w")

        actions = ttk.Frame(top, style="Main.TFrame")
        actions.pack(side=tk.RIGHT)
        self.toggle_button = ttk.Button(actions, text="+ Add business",
                                        command=lambda: self.call(Events.TOGGLE_FORM))
        self.toggle_button.pack(side=tk.LEFT, padx=(0, 3))
        ttk.Button(actions, text="↻ Reload", command=lambda: self.call(Events.RELOAD)).pack(
            side=tk.LEFT, padx=(0, 3)
        )
        self.theme_button = ttk.Button(actions, text="◐ Theme", command=lambda: self.call(Events.TOGGLE_THEME))
        self.theme_button.pack(side=tk.LEFT)

        # ─────────────────────────────────────────────────────────────
        # SEARCH BAR
        # ─────────────────────────────────────────────────────────────
        search_bar = ttk.Frame(self, style="Main.TFrame")
        search_bar.pack(fill=tk.X, pady=(0, 6))
        ttk.Label(search_bar, text="Search:", style="Muted.TLabel").pack(side=tk.LEFT, padx=(0, 4))
        self.search_var = tk.StringVar()
        self.search_entry = ttk.Entry(search_bar, textvariable=self.search_var)
        self.search_entry.pack(side=tk.LEFT, fill=tk.X, expand=True)
        self.search_var.trace_add("write", lambda *_: self.call(Events.SEARCH, self.search_var.get()))

        # ─────────────────────────────────────────────────────────────
        # FORM (collapsed by default)
        # ─────────────────────────────────────────────────────────────
        self.form_holder = ttk.Frame(self, style="Main.TFrame")
        self.form_holder.pack(fill=tk.X)
        self.form = BusinessForm(self.form_holder, self.call, suggest_enabled=self.suggest_enabled)

        # ─────────────────────────────────────────────────────────────
        # MAIN: scrollable card list + empty state
        # ─────────────────────────────────────────────────────────────
        list_frame = ttk.Frame(self, style="Main.TFrame")
        list_frame.pack(fill=tk.BOTH, expand=True, pady=(6, 0))

        self.canvas = tk.Canvas(list_frame, highlightthickness=0, borderwidth=0)
        vsb = ttk.Scrollbar(list_frame, orient=tk.VERTICAL, command=self._on_scrollbar)
        self.canvas.configure(yscrollcommand=vsb.set)
        vsb.pack(side=tk.RIGHT, fill=tk.Y)
        self.canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        self.cards_frame = ttk.Frame(self.canvas, style="Main.TFrame")
        self._cards_window = self.canvas.create_window((0, 0), window=self.cards_frame, anchor="nw")
        self.cards_frame.bind(
            "<Configure>", lambda _e: self.canvas.configure(scrollregion=self.canvas.bbox("all"))
        )
        self.canvas.bind(
            "<Configure>", lambda e: self.canvas.itemconfigure(self._cards_window, width=e.width)
        )
        self.canvas.bind_all("<MouseWheel>", self._on_mousewheel, add="+")

        self.empty_label = ttk.Label(list_frame, text=EMPTY_STATE_TEXT, style="Muted.TLabel")

        # Set by the app so the popover can follow scrolling
        self.on_scroll = None

    # ─────────────────────────────────────────────────────────────────
    # Public interface for app.py
    # ─────────────────────────────────────────────────────────────────
    def show(self, model: DirectoryModel):
        """Replace every card with the ones in `model`."""
        for widget in self.card_widgets:
            widget.destroy()
        self.card_widgets = []

        if model.empty_state_visible:
            self.empty_label.place(relx=0.5, rely=0.2, anchor="n")
            self.canvas.yview_moveto(0)
            return
        self.empty_label.place_forget()

        for card in model.cards:
            self.card_widgets.append(self._build_card(card))
        self.canvas.yview_moveto(0)

    def card_widget(self, index: int):
        if 0 <= index < len(self.card_widgets):
            return self.card_widgets[index]
        return None

    def sync_form(self, form: FormState):
        if form.visible and not self.form.winfo_manager():
            self.form.pack(fill=tk.X, pady=(0, 6))
            self.form.focus_first()
        elif not form.visible and self.form.winfo_manager():
            self.form.pack_forget()
        self.toggle_button.configure(text="− Close form" if form.visible else "+ Add business")
        self.form.sync(form)

    # ─────────────────────────────────────────────────────────────────
    # Cards
    # ─────────────────────────────────────────────────────────────────
    def _build_card(self, card: BusinessCard) -> ttk.Frame:
        frame = ttk.Frame(self.cards_frame, style="Card.TFrame", padding=8, takefocus=True)
        frame.pack(fill=tk.X, pady=(0, 6))

        ttk.Label(frame, text=card.title, style="CardTitle.TLabel").pack(anchor="w")
        meta = ttk.Frame(frame, style="Card.TFrame")
        meta.pack(fill=tk.X, pady=(2, 4))
        for badge in card.badges:
            ttk.Label(meta, text=badge, style="Badge.TLabel").pack(side=tk.LEFT, padx=(0, 4))
        ttk.Label(frame, text=card.description,
                  style="CardBody.TLabel" if card.has_description else "CardMuted.TLabel",
                  wraplength=640, justify=tk.LEFT).pack(anchor="w")

        select = lambda _e=None, i=card.index: self.call(Events.SELECT, i)
        for widget in [frame, meta, *frame.winfo_children(), *meta.winfo_children()]:
            widget.bind("<Button-1>", select)
        frame.bind("<Return>", select)
        frame.bind("<space>", select)
        return frame

    def _on_scrollbar(self, *args):
        self.canvas.yview(*args)
        if self.on_scroll:
            self.on_scroll()

    def _on_mousewheel(self, event):
        if not self.card_widgets or not event.delta:
            return
        self.canvas.yview_scroll(-1 if event.delta > 0 else 1, "units")
        if self.on_scroll:
            self.on_scroll()

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict

from bizdir.models import FORM_FIELDS
from gui.controller import Events
from gui.state import FormState

FIELD_LABELS = {
    "name": "Name *",
    "category": "Category *",
    "location": "Location *",
    "description": "Description",
}


class BusinessForm(ttk.Frame):
    """
    Collapsible creation form.

    The form never validates or saves anything itself; it reports edits and
    button presses through `call(event, *args)` and mirrors FormState.
    """

    def __init__(self, parent, call: Callable[..., None], suggest_enabled: bool = False):
        super().__init__(parent, style="Panel.TFrame", padding=10)
        self.call = call
        self.vars: Dict[str, tk.StringVar] = {}
        self._syncing = False

        ttk.Label(self, text="Add a business", style="CardTitle.TLabel").grid(
            row=0, column=0, columnspan=3, sticky="w", pady=(0, 6)
        )
        self.columnconfigure(1, weight=1)

        for row, name in enumerate(FORM_FIELDS, start=1):
            ttk.Label(self, text=FIELD_LABELS[name], style="CardBody.TLabel").grid(
                row=row, column=0, sticky="w", padx=(0, 8), pady=2
            )
            var = tk.StringVar()
            var.trace_add("write", lambda *_args, n=name: self._on_edit(n))
            entry = ttk.Entry(self, textvariable=var, width=40)
            entry.grid(row=row, column=1, sticky="ew", pady=2)
            entry.bind("<Return>", lambda _e: self._submit())
            self.vars[name] = var
            if name == "name":
                self.first_entry = entry

        self.suggest_button = ttk.Button(self, text="Suggest", command=self._suggest)
        if suggest_enabled:
            self.suggest_button.grid(row=FORM_FIELDS.index("location") + 1, column=2, padx=(6, 0))

        actions = ttk.Frame(self, style="Panel.TFrame")
        actions.grid(row=len(FORM_FIELDS) + 1, column=0, columnspan=3, sticky="e", pady=(8, 0))
        ttk.Button(actions, text="Cancel", command=lambda: self.call(Events.CANCEL_FORM)).pack(
            side=tk.RIGHT
        )
        self.submit_button = ttk.Button(actions, text="Save", style="Accent.TButton",
                                        command=self._submit)
        self.submit_button.pack(side=tk.RIGHT, padx=(0, 6))

    def values(self) -> Dict[str, str]:
        return {name: var.get() for name, var in self.vars.items()}

    def sync(self, form: FormState) -> None:
        """Mirror controller state into the widgets."""
        self._syncing = True
        try:
            for name, var in self.vars.items():
                value = form.values.get(name, "")
                if var.get() != value:
                    var.set(value)
        finally:
            self._syncing = False
        state = tk.DISABLED if form.submitting else tk.NORMAL
        self.submit_button.configure(state=state)
        self.suggest_button.configure(state=state)

    def focus_first(self) -> None:
        self.first_entry.focus_set()

    def _on_edit(self, name: str) -> None:
        if not self._syncing:
            self.call(Events.EDIT_FIELD, name, self.vars[name].get())

    def _submit(self) -> None:
        if str(self.submit_button.cget("state")) == tk.DISABLED:
            return
        self.call(Events.SUBMIT, self.values())

    def _suggest(self) -> None:
        self.call(Events.SUGGEST_LOCATION, self.values())

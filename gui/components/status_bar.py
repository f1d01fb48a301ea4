import tkinter as tk
from tkinter import ttk

from gui.status import Status, StatusIndicator, StatusKind


class StatusBar(ttk.Frame):
    """
    Status banner bound to a StatusIndicator.

    Displays: the current message (styled by kind), a busy progress bar,
    and the record count for the visible list.
    """

    def __init__(self, parent, indicator: StatusIndicator):
        super().__init__(parent, style="Panel.TFrame", padding=(6, 3))

        # Status message (left side)
        self.message_var = tk.StringVar(value="")
        self.message_label = ttk.Label(self, textvariable=self.message_var, style="Status.TLabel")
        self.message_label.pack(side=tk.LEFT)

        # Metrics container (right side)
        metrics_frame = ttk.Frame(self, style="Panel.TFrame")
        metrics_frame.pack(side=tk.RIGHT)

        # Busy indicator
        self.progress = ttk.Progressbar(metrics_frame, mode="indeterminate", length=80)
        self.progress.pack(side=tk.RIGHT, padx=(4, 0))
        self._busy = False

        # Visible / total count
        self.count_var = tk.StringVar(value="")
        ttk.Label(metrics_frame, textvariable=self.count_var, style="Status.TLabel").pack(
            side=tk.RIGHT, padx=(8, 0)
        )

        indicator.subscribe(self.update_status)

    def update_status(self, status: Status):
        """Refresh the banner from the indicator."""
        self.message_var.set(status.message or "")
        if status.kind is StatusKind.ERROR:
            self.message_label.configure(style="StatusError.TLabel")
        elif status.kind is StatusKind.INFO and not status.busy:
            self.message_label.configure(style="StatusSuccess.TLabel")
        else:
            self.message_label.configure(style="Status.TLabel")

        if status.busy and not self._busy:
            self.progress.start(12)
        elif not status.busy and self._busy:
            self.progress.stop()
        self._busy = status.busy

    def set_counts(self, visible: int, total: int):
        if total == visible:
            self.count_var.set(f"{total:,} businesses")
        else:
            self.count_var.set(f"{visible:,} of {total:,} businesses")

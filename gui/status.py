"""Status/busy indicator.

Holds exactly one message at a time. Setting a status replaces the previous
one; there is no queue.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from bizdir.utils.logger import get_logger

logger = get_logger(__name__)

LOADING_MESSAGE = "Loading businesses…"
SAVING_MESSAGE = "Saving business…"
CREATED_MESSAGE = "Business added."


class StatusKind(str, Enum):
    IDLE = "idle"
    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True)
class Status:
    kind: StatusKind = StatusKind.IDLE
    message: Optional[str] = None
    busy: bool = False

    @property
    def is_error(self) -> bool:
        return self.kind is StatusKind.ERROR


StatusListener = Callable[[Status], None]


class StatusIndicator:
    """Three-valued status surface with change listeners."""

    def __init__(self):
        self._status = Status()
        self._listeners: List[StatusListener] = []

    @property
    def current(self) -> Status:
        return self._status

    @property
    def message(self) -> Optional[str]:
        return self._status.message

    @property
    def kind(self) -> StatusKind:
        return self._status.kind

    def subscribe(self, listener: StatusListener) -> None:
        self._listeners.append(listener)
        listener(self._status)

    def set(self, message: Optional[str] = None, *, error: bool = False, busy: bool = False) -> None:
        """Show `message`; a missing or blank message clears the indicator."""
        if not message:
            self._publish(Status())
            return
        kind = StatusKind.ERROR if error else StatusKind.INFO
        self._publish(Status(kind=kind, message=message, busy=busy and not error))

    def info(self, message: Optional[str], *, busy: bool = False) -> None:
        self.set(message, busy=busy)

    def error(self, message: Optional[str]) -> None:
        if message:
            logger.warning(message)
        self.set(message, error=True)

    def clear(self) -> None:
        self.set(None)

    def _publish(self, status: Status) -> None:
        self._status = status
        for listener in list(self._listeners):
            listener(status)

"""Error kinds surfaced to the user.

Every failure at an async boundary is mapped to one of these and routed to the
status indicator; none of them is allowed to escape to the event loop.
"""

from __future__ import annotations

from typing import Iterable, Tuple


class DirectoryError(Exception):
    """Base class for user-facing directory errors."""

    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(DirectoryError):
    """Store credentials are missing."""

    kind = "configuration"


class FetchError(DirectoryError):
    """Loading the record set failed."""

    kind = "fetch"


class ValidationError(DirectoryError):
    """Required form fields are missing."""

    kind = "validation"

    def __init__(self, message: str, missing: Iterable[str] = ()):
        super().__init__(message)
        self.missing: Tuple[str, ...] = tuple(missing)


class WriteError(DirectoryError):
    """Creating a record failed."""

    kind = "write"

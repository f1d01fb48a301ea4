"""Application state container.

One AppState is owned by the DirectoryController; nothing else holds
references to the cache, the active query or the visibility flags.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from bizdir.cache import BusinessCache
from bizdir.models import FORM_FIELDS, Business


def empty_form_values() -> Dict[str, str]:
    return {name: "" for name in FORM_FIELDS}


@dataclass
class FormState:
    """Creation form: hidden/visible plus the in-flight guard."""

    visible: bool = False
    submitting: bool = False
    values: Dict[str, str] = field(default_factory=empty_form_values)

    def clear(self) -> None:
        self.values = empty_form_values()


@dataclass
class PopoverState:
    """Detail popover anchored to one rendered card."""

    visible: bool = False
    anchor_index: Optional[int] = None
    business: Optional[Business] = None

    def close(self) -> None:
        self.visible = False
        self.anchor_index = None
        self.business = None


@dataclass
class AppState:
    """Holds the cache and all ephemeral UI state for one session."""

    cache: BusinessCache = field(default_factory=BusinessCache)
    query: str = ""
    visible: Sequence[Business] = field(default_factory=list)
    form: FormState = field(default_factory=FormState)
    popover: PopoverState = field(default_factory=PopoverState)
    theme: str = "light"

    @property
    def businesses(self) -> List[Business]:
        return self.cache.items

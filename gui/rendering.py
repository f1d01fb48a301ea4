"""Display model for the business list.

`render_businesses` is pure: it turns records into cards and decides whether
the empty state shows. Widgets draw whatever the latest model says and throw
away everything they drew before.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from bizdir.models import Business

NO_DESCRIPTION = "No description provided."
EMPTY_STATE_TEXT = "No businesses match your search yet."


@dataclass(frozen=True)
class BusinessCard:
    index: int
    title: str
    badges: Tuple[str, str]
    description: str
    business: Business

    @property
    def has_description(self) -> bool:
        return self.business.description is not None


@dataclass(frozen=True)
class DirectoryView:
    cards: Tuple[BusinessCard, ...] = ()

    @property
    def empty_state_visible(self) -> bool:
        return not self.cards

    @property
    def list_visible(self) -> bool:
        return bool(self.cards)

    def card_at(self, index: int) -> Optional[BusinessCard]:
        if 0 <= index < len(self.cards):
            return self.cards[index]
        return None


def render_card(index: int, business: Business) -> BusinessCard:
    return BusinessCard(
        index=index,
        title=business.name,
        badges=(business.category, business.location),
        description=business.description or NO_DESCRIPTION,
        business=business,
    )


def render_businesses(items: Sequence[Business]) -> DirectoryView:
    return DirectoryView(cards=tuple(render_card(i, b) for i, b in enumerate(items)))

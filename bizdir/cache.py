"""In-memory record cache.

The cache is the single source of truth for what the directory shows. It is
only ever mutated by a full replace (reload), a prepend (record created) or a
clear (failed load).
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from bizdir.models import Business


class BusinessCache:
    """Ordered, newest-first sequence of businesses."""

    def __init__(self, items: Optional[Iterable[Business]] = None):
        self._items: List[Business] = list(items or [])
        # Records created this session, oldest first
        self._created: List[Business] = []

    def __iter__(self) -> Iterator[Business]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Business:
        return self._items[index]

    @property
    def items(self) -> List[Business]:
        return self._items

    def checkpoint(self) -> int:
        """Marker used to find records created after a load was issued."""
        return len(self._created)

    def replace_all(self, items: Iterable[Business], created_since: Optional[int] = None) -> None:
        """Replace the cache wholesale.

        When `created_since` is given, records created after that checkpoint
        that are missing from `items` are prepended again so a slow reload
        never drops a write that landed while it was in flight.
        """
        loaded = list(items)
        self._items = loaded
        if created_since is None:
            return
        loaded_ids = {b.id for b in loaded if b.id is not None}
        for business in self._created[created_since:]:
            if business.id is None or business.id not in loaded_ids:
                self._items.insert(0, business)

    def record_created(self, business: Business) -> None:
        """Prepend a freshly persisted record."""
        self._items.insert(0, business)
        self._created.append(business)

    def clear(self) -> None:
        self._items = []

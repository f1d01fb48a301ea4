"""
Address autocomplete for the location field.

The capability is optional. Callers must treat a missing provider, an empty
result and a failing provider the same way: keep whatever the user typed.
"""
from dataclasses import dataclass
from typing import Optional

import requests

from .config import Settings, get_settings
from .utils.logger import get_logger

NOMINATIM_SEARCH_URL = "https://nominatim.openstreetmap.org/search"
USER_AGENT = "bizdir/1.0 (business directory)"

logger = get_logger(__name__)


@dataclass(frozen=True)
class AddressSuggestion:
    formatted_address: str
    place_name: Optional[str] = None


class NominatimAutocomplete:
    """Suggest a formatted address using OpenStreetMap's Nominatim search API."""

    def __init__(self, search_url: str = NOMINATIM_SEARCH_URL, timeout: float = 5.0):
        self.search_url = search_url
        self.timeout = timeout

    def suggest(self, text: str) -> Optional[AddressSuggestion]:
        """
        Return the best match for free-text `text`, or None.

        Raises:
            requests.RequestException: on transport or HTTP failure
        """
        query = (text or "").strip()
        if not query:
            return None

        response = requests.get(
            self.search_url,
            params={"q": query, "format": "jsonv2", "limit": 1, "addressdetails": 0},
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            timeout=self.timeout,
        )
        response.raise_for_status()
        results = response.json()
        if not results:
            return None

        top = results[0]
        formatted = (top.get("display_name") or "").strip()
        if not formatted:
            return None
        place = (top.get("name") or "").strip() or None
        return AddressSuggestion(formatted_address=formatted, place_name=place)


def get_autocomplete(settings: Optional[Settings] = None) -> Optional[NominatimAutocomplete]:
    """Return the configured provider, or None when autocomplete is off."""
    settings = settings or get_settings()
    provider = (settings.autocomplete_provider or "").strip().lower()
    if provider == "nominatim":
        return NominatimAutocomplete()
    if provider:
        logger.warning("Unknown autocomplete provider %r; autocomplete disabled", provider)
    return None

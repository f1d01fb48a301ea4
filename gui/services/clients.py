"""Client factories for the GUI layer."""

from __future__ import annotations

from typing import Optional

from bizdir.config import Settings, get_settings
from bizdir.geocoding import NominatimAutocomplete, get_autocomplete
from bizdir.store_client import DirectoryStoreClient


def get_store_client(settings: Optional[Settings] = None) -> DirectoryStoreClient:
    """Return a store client built from settings.

    The client is returned even when credentials are missing; callers check
    `is_configured` and surface a configuration error instead of failing here.
    """

    return DirectoryStoreClient.from_settings(settings or get_settings())


def get_autocomplete_provider(settings: Optional[Settings] = None) -> Optional[NominatimAutocomplete]:
    """Return the address autocomplete provider, or None when disabled."""

    return get_autocomplete(settings or get_settings())

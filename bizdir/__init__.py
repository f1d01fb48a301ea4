"""
Bizdir - Business Directory

Browse, search and add local businesses backed by a hosted record store.
"""

__version__ = "1.0.0"

from .models import Business, BusinessDraft
from .store_client import DirectoryStoreClient, StoreResponse

__all__ = [
    "Business",
    "BusinessDraft",
    "DirectoryStoreClient",
    "StoreResponse",
]

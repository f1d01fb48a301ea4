"""Data schemas and validation."""
from .schemas import Business, BusinessDraft, REQUIRED_FIELDS, FORM_FIELDS

__all__ = [
    "Business",
    "BusinessDraft",
    "REQUIRED_FIELDS",
    "FORM_FIELDS",
]

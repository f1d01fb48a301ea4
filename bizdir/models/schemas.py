"""Pydantic schemas for directory records.

These schemas act as contracts at both ingress points: rows coming back from
the hosted store and values typed into the creation form. Required text is
trimmed and must be non-empty; a blank description is stored as None.
"""
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from bizdir.errors import ValidationError

REQUIRED_FIELDS = ("name", "category", "location")
FORM_FIELDS = REQUIRED_FIELDS + ("description",)

REQUIRED_FIELDS_MESSAGE = (
    "Please fill in the required fields: name, category, and location."
)


class BusinessDraft(BaseModel):
    """A normalized record that has not been persisted yet."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    category: str
    location: str
    description: Optional[str] = None

    @field_validator("name", "category", "location", mode="before")
    @classmethod
    def required_text(cls, v: Any) -> str:
        if v is None or not str(v).strip():
            raise ValueError("Field is required")
        return str(v).strip()

    @field_validator("description", mode="before")
    @classmethod
    def blank_description_is_none(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        text = str(v).strip()
        return text or None

    @classmethod
    def from_form(cls, values: Mapping[str, Any]) -> "BusinessDraft":
        """Build a draft from raw form values.

        Raises:
            ValidationError: when any required field is missing or blank.
        """
        try:
            return cls(**{key: values.get(key) for key in FORM_FIELDS})
        except PydanticValidationError as exc:
            missing = []
            for err in exc.errors():
                loc = err.get("loc") or ()
                if loc and loc[0] in REQUIRED_FIELDS and loc[0] not in missing:
                    missing.append(loc[0])
            raise ValidationError(REQUIRED_FIELDS_MESSAGE, missing=missing) from exc

    def to_payload(self) -> Dict[str, Any]:
        """Row body for the store insert."""
        return self.model_dump()


class Business(BusinessDraft):
    """A directory record as held in the cache.

    `id` is assigned by the store and stays None until the row is persisted.
    """

    id: Optional[Union[int, str]] = None

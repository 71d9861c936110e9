"""
models/base.py — shared record base class and reusable field types.

Three model flavours exist per entity:
  <Entity>        — a stored row, read back from Supabase
  <Entity>Create  — the form schema for a new record
  <Entity>Update  — the same constraints, every field optional
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, ClassVar, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    ValidationInfo,
)
from pydantic_core import PydanticCustomError

from agneby_shared.time_utils import ensure_utc


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------

# Message shown when a required form field is left empty.
REQUIRED_MESSAGES: dict[str, str] = {
    "name": "Le nom est requis",
    "title": "Le titre est requis",
    "company": "L'entreprise est requise",
    "description": "La description est requise",
    "address": "L'adresse est requise",
    "phone": "Le téléphone est requis",
    "city": "La ville est requise",
    "contact": "Le contact est requis",
    "category": "La catégorie est requise",
    "type": "Le type de contrat est requis",
    "price_range": "La gamme de prix est requise",
    "date": "La date est requise",
    "time": "L'heure est requise",
    "location": "Le lieu est requis",
}
DEFAULT_REQUIRED_MESSAGE = "Ce champ est requis"


def required_message(field_name: str | None) -> str:
    return REQUIRED_MESSAGES.get(field_name or "", DEFAULT_REQUIRED_MESSAGE)


def _required(value: str, info: ValidationInfo) -> str:
    value = value.strip()
    if not value:
        raise PydanticCustomError("required", required_message(info.field_name))
    return value


def _blank_to_none(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _falsy_to_none(value: Any) -> Any:
    # An optional price of 0 is stored as "no price".
    if value in (None, "", 0):
        return None
    return value


RequiredStr = Annotated[str, AfterValidator(_required)]
OptionalStr = Annotated[Optional[str], BeforeValidator(_blank_to_none)]
NonNegative = Annotated[float, Field(ge=0)]
OptionalPrice = Annotated[Optional[NonNegative], BeforeValidator(_falsy_to_none)]
Rating = Annotated[float, Field(ge=1, le=5)]
Latitude = Annotated[float, Field(ge=-90, le=90)]
Longitude = Annotated[float, Field(ge=-180, le=180)]
UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]
OptionalEmail = Annotated[Optional[EmailStr], BeforeValidator(_blank_to_none)]


# ---------------------------------------------------------------------------
# Stored records
# ---------------------------------------------------------------------------

class Record(BaseModel):
    """Fields every stored row carries."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_db_row(cls, row: dict[str, Any]) -> "Record":
        return cls.model_validate(row)


# ---------------------------------------------------------------------------
# Form schemas
# ---------------------------------------------------------------------------

class CreateSchema(BaseModel):
    """Validated payload of a "new" form."""

    model_config = ConfigDict(extra="forbid")

    def to_document(self) -> dict[str, Any]:
        """JSON-ready dict; absent optional fields are left out."""
        return self.model_dump(mode="json", exclude_none=True)


class UpdateSchema(BaseModel):
    """Validated partial payload of an edit form."""

    model_config = ConfigDict(extra="forbid")

    # Fields that may be cleared (set to null) by an edit.
    nullable: ClassVar[frozenset[str]] = frozenset()

    def to_changes(self) -> dict[str, Any]:
        changes = self.model_dump(mode="json", exclude_unset=True)
        return {
            k: v for k, v in changes.items()
            if v is not None or k in self.nullable
        }

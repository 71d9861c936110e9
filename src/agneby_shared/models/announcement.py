"""
models/announcement.py — Pydantic models for the announcements table.

Announcements are classified ads posted by local tradespeople.
"""

from __future__ import annotations

from typing import ClassVar

from agneby_shared.constants import AnnouncementCategory, City
from agneby_shared.models.base import (
    CreateSchema,
    OptionalPrice,
    OptionalStr,
    Record,
    RequiredStr,
    UpdateSchema,
)


class Announcement(Record):
    """Matches the announcements table row."""

    title: str
    description: str
    category: str
    contact: str
    is_whatsapp: bool = False
    city: str
    price: float | None = None
    image: str | None = None


class AnnouncementCreate(CreateSchema):
    title: RequiredStr
    description: RequiredStr
    category: AnnouncementCategory
    contact: RequiredStr
    is_whatsapp: bool = False
    city: City
    price: OptionalPrice = None
    image: OptionalStr = None


class AnnouncementUpdate(UpdateSchema):
    nullable: ClassVar[frozenset[str]] = frozenset({"price", "image"})

    title: RequiredStr | None = None
    description: RequiredStr | None = None
    category: AnnouncementCategory | None = None
    contact: RequiredStr | None = None
    is_whatsapp: bool | None = None
    city: City | None = None
    price: OptionalPrice = None
    image: OptionalStr = None

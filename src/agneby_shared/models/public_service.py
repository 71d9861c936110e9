"""
models/public_service.py — Pydantic models for the public_services table.

Coordinates are WGS84 degrees; the mobile app pins them on its map.
"""

from __future__ import annotations

from typing import ClassVar

from agneby_shared.constants import City, PublicServiceCategory
from agneby_shared.models.base import (
    CreateSchema,
    Latitude,
    Longitude,
    OptionalEmail,
    OptionalStr,
    Record,
    RequiredStr,
    UpdateSchema,
)


class PublicService(Record):
    """Matches the public_services table row."""

    name: str
    description: str
    address: str
    city: str
    phone: str
    email: str | None = None
    latitude: float
    longitude: float
    category: str
    opening_hours: str | None = None


class PublicServiceCreate(CreateSchema):
    name: RequiredStr
    description: RequiredStr
    address: RequiredStr
    city: City
    phone: RequiredStr
    email: OptionalEmail = None
    latitude: Latitude
    longitude: Longitude
    category: PublicServiceCategory
    opening_hours: OptionalStr = None


class PublicServiceUpdate(UpdateSchema):
    nullable: ClassVar[frozenset[str]] = frozenset({"email", "opening_hours"})

    name: RequiredStr | None = None
    description: RequiredStr | None = None
    address: RequiredStr | None = None
    city: City | None = None
    phone: RequiredStr | None = None
    email: OptionalEmail = None
    latitude: Latitude | None = None
    longitude: Longitude | None = None
    category: PublicServiceCategory | None = None
    opening_hours: OptionalStr = None

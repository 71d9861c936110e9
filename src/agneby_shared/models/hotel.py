"""
models/hotel.py — Pydantic models for the hotels table.

`images` holds public URLs (uploaded through storage or pasted in the
form); `amenities` and `price_range` come from fixed vocabularies.
"""

from __future__ import annotations

from pydantic import Field

from agneby_shared.constants import Amenity, City, PriceRange
from agneby_shared.models.base import (
    CreateSchema,
    Rating,
    Record,
    RequiredStr,
    UpdateSchema,
)


class Hotel(Record):
    """Matches the hotels table row."""

    name: str
    address: str
    phone: str
    city: str
    description: str
    images: list[str] = Field(default_factory=list)
    rating: float
    price_range: str
    amenities: list[str] = Field(default_factory=list)


class HotelCreate(CreateSchema):
    name: RequiredStr
    address: RequiredStr
    phone: RequiredStr
    city: City
    description: RequiredStr
    images: list[str] = Field(default_factory=list)
    rating: Rating = 3
    price_range: PriceRange
    amenities: list[Amenity] = Field(default_factory=list)


class HotelUpdate(UpdateSchema):
    name: RequiredStr | None = None
    address: RequiredStr | None = None
    phone: RequiredStr | None = None
    city: City | None = None
    description: RequiredStr | None = None
    images: list[str] | None = None
    rating: Rating | None = None
    price_range: PriceRange | None = None
    amenities: list[Amenity] | None = None

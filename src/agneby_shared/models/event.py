"""
models/event.py — Pydantic models for the events table.

`date` is the event's start instant (UTC); `time` is the free-text
display time entered in the form ("18h00", "toute la journée").
"""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from agneby_shared.constants import City
from agneby_shared.models.base import (
    CreateSchema,
    OptionalPrice,
    OptionalStr,
    Record,
    RequiredStr,
    UpdateSchema,
    UtcDatetime,
)


class Event(Record):
    """Matches the events table row."""

    title: str
    description: str
    date: datetime
    time: str
    location: str
    city: str
    image: str | None = None
    contact: str
    price: float | None = None


class EventCreate(CreateSchema):
    title: RequiredStr
    description: RequiredStr
    date: UtcDatetime
    time: RequiredStr
    location: RequiredStr
    city: City
    image: OptionalStr = None
    contact: RequiredStr
    price: OptionalPrice = None


class EventUpdate(UpdateSchema):
    nullable: ClassVar[frozenset[str]] = frozenset({"image", "price"})

    title: RequiredStr | None = None
    description: RequiredStr | None = None
    date: UtcDatetime | None = None
    time: RequiredStr | None = None
    location: RequiredStr | None = None
    city: City | None = None
    image: OptionalStr = None
    contact: RequiredStr | None = None
    price: OptionalPrice = None

"""
agneby_shared.models — Pydantic models matching each Supabase table.

These models are used by:
- agneby_admin.gateway: serialize form payloads and parse stored rows
- agneby_admin.views: validate form submissions

Stored records are parsed with Model.from_db_row(row).
"""

from agneby_shared.models.announcement import (
    Announcement,
    AnnouncementCreate,
    AnnouncementUpdate,
)
from agneby_shared.models.base import CreateSchema, Record, UpdateSchema
from agneby_shared.models.event import Event, EventCreate, EventUpdate
from agneby_shared.models.hotel import Hotel, HotelCreate, HotelUpdate
from agneby_shared.models.job_offer import JobOffer, JobOfferCreate, JobOfferUpdate
from agneby_shared.models.pharmacy import Pharmacy, PharmacyCreate, PharmacyUpdate
from agneby_shared.models.product import Product, ProductCreate, ProductUpdate
from agneby_shared.models.public_service import (
    PublicService,
    PublicServiceCreate,
    PublicServiceUpdate,
)

__all__ = [
    "Record",
    "CreateSchema",
    "UpdateSchema",
    "Pharmacy",
    "PharmacyCreate",
    "PharmacyUpdate",
    "Hotel",
    "HotelCreate",
    "HotelUpdate",
    "Product",
    "ProductCreate",
    "ProductUpdate",
    "Event",
    "EventCreate",
    "EventUpdate",
    "JobOffer",
    "JobOfferCreate",
    "JobOfferUpdate",
    "PublicService",
    "PublicServiceCreate",
    "PublicServiceUpdate",
    "Announcement",
    "AnnouncementCreate",
    "AnnouncementUpdate",
]

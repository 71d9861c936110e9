"""
models/pharmacy.py — Pydantic models for the pharmacies table.
"""

from __future__ import annotations

from agneby_shared.constants import City
from agneby_shared.models.base import CreateSchema, Record, RequiredStr, UpdateSchema


class Pharmacy(Record):
    """Matches the pharmacies table row."""

    name: str
    address: str
    phone: str
    city: str
    is_on_duty: bool = False


class PharmacyCreate(CreateSchema):
    name: RequiredStr
    address: RequiredStr
    phone: RequiredStr
    city: City
    is_on_duty: bool = False


class PharmacyUpdate(UpdateSchema):
    name: RequiredStr | None = None
    address: RequiredStr | None = None
    phone: RequiredStr | None = None
    city: City | None = None
    is_on_duty: bool | None = None

"""
models/job_offer.py — Pydantic models for the job_offers table.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from agneby_shared.constants import City, JobType
from agneby_shared.models.base import (
    CreateSchema,
    OptionalStr,
    Record,
    RequiredStr,
    UpdateSchema,
)


class JobOffer(Record):
    """Matches the job_offers table row."""

    title: str
    company: str
    description: str
    requirements: list[str] = Field(default_factory=list)
    salary: str | None = None
    type: str
    city: str
    contact: str
    is_whatsapp: bool = False


class JobOfferCreate(CreateSchema):
    title: RequiredStr
    company: RequiredStr
    description: RequiredStr
    requirements: list[str] = Field(default_factory=list)
    salary: OptionalStr = None
    type: JobType
    city: City
    contact: RequiredStr
    is_whatsapp: bool = False


class JobOfferUpdate(UpdateSchema):
    nullable: ClassVar[frozenset[str]] = frozenset({"salary"})

    title: RequiredStr | None = None
    company: RequiredStr | None = None
    description: RequiredStr | None = None
    requirements: list[str] | None = None
    salary: OptionalStr = None
    type: JobType | None = None
    city: City | None = None
    contact: RequiredStr | None = None
    is_whatsapp: bool | None = None

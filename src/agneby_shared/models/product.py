"""
models/product.py — Pydantic models for the products (marketplace) table.
"""

from __future__ import annotations

from pydantic import Field

from agneby_shared.constants import City, ProductCategory
from agneby_shared.models.base import (
    CreateSchema,
    NonNegative,
    Record,
    RequiredStr,
    UpdateSchema,
)


class Product(Record):
    """Matches the products table row."""

    name: str
    description: str
    price: float
    images: list[str] = Field(default_factory=list)
    category: str
    contact: str
    is_whatsapp: bool = False
    city: str


class ProductCreate(CreateSchema):
    name: RequiredStr
    description: RequiredStr
    price: NonNegative
    images: list[str] = Field(default_factory=list)
    category: ProductCategory
    contact: RequiredStr
    is_whatsapp: bool = False
    city: City


class ProductUpdate(UpdateSchema):
    name: RequiredStr | None = None
    description: RequiredStr | None = None
    price: NonNegative | None = None
    images: list[str] | None = None
    category: ProductCategory | None = None
    contact: RequiredStr | None = None
    is_whatsapp: bool | None = None
    city: City | None = None

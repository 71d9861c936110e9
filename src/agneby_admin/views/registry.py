"""
views/registry.py — per-entity configuration of the list and form views.

Each EntityView ties a gateway collection to its URL slug, its filter
chain, its dynamic row fields and the messages the dashboard shows.
"""

from __future__ import annotations

from dataclasses import dataclass

from agneby_shared.constants import (
    ANNOUNCEMENT_CATEGORIES,
    CITIES,
    JOB_TYPES,
    PRICE_RANGES,
    PRODUCT_CATEGORIES,
    PUBLIC_SERVICE_CATEGORIES,
)
from agneby_shared.models import (
    AnnouncementCreate,
    AnnouncementUpdate,
    CreateSchema,
    EventCreate,
    EventUpdate,
    HotelCreate,
    HotelUpdate,
    JobOfferCreate,
    JobOfferUpdate,
    PharmacyCreate,
    PharmacyUpdate,
    ProductCreate,
    ProductUpdate,
    PublicServiceCreate,
    PublicServiceUpdate,
    UpdateSchema,
)

from agneby_admin.views.filters import CategoricalFilter, FilterChain

CITY_FILTER = CategoricalFilter("city", "city", CITIES)


@dataclass(frozen=True)
class Messages:
    created: str
    create_error: str
    load_error: str
    # Formatted with the record's display name.
    deleted: str
    updated: str = "Modifications enregistrées"
    update_error: str = "Erreur lors de la mise à jour"
    delete_error: str = "Erreur lors de la suppression"
    created_description: str | None = None
    scheduled_description: str | None = None


@dataclass(frozen=True)
class EntityView:
    key: str
    slug: str
    nav_label: str
    title_field: str
    create_schema: type[CreateSchema]
    update_schema: type[UpdateSchema]
    chain: FilterChain
    messages: Messages
    row_fields: tuple[str, ...] = ()
    push_notification: bool = False

    @property
    def list_route(self) -> str:
        return f"/dashboard/{self.slug}"

    @property
    def new_route(self) -> str:
        return f"/dashboard/{self.slug}/new"

    def edit_route(self, document_id: str) -> str:
        return f"/dashboard/{self.slug}/{document_id}/edit"

    def display_name(self, record: object, fallback: str) -> str:
        return str(getattr(record, self.title_field, None) or fallback)


PHARMACIES = EntityView(
    key="pharmacies",
    slug="pharmacies",
    nav_label="Pharmacies",
    title_field="name",
    create_schema=PharmacyCreate,
    update_schema=PharmacyUpdate,
    chain=FilterChain(
        search_fields=("name", "address"),
        filters=(
            CITY_FILTER,
            CategoricalFilter(
                "status",
                "is_on_duty",
                ("on-duty", "off-duty"),
                value_map={"on-duty": True, "off-duty": False},
            ),
        ),
    ),
    messages=Messages(
        created="Pharmacie ajoutée avec succès !",
        create_error="Erreur lors de l'ajout de la pharmacie",
        load_error="Erreur lors du chargement des pharmacies",
        deleted='Pharmacie "{name}" supprimée avec succès',
    ),
)

HOTELS = EntityView(
    key="hotels",
    slug="hotels",
    nav_label="Hôtels",
    title_field="name",
    create_schema=HotelCreate,
    update_schema=HotelUpdate,
    chain=FilterChain(
        search_fields=("name", "description", "address"),
        filters=(
            CITY_FILTER,
            CategoricalFilter("price_range", "price_range", PRICE_RANGES),
        ),
    ),
    messages=Messages(
        created="Hôtel ajouté avec succès !",
        create_error="Erreur lors de l'ajout de l'hôtel",
        load_error="Erreur lors du chargement des hôtels",
        deleted='Hôtel "{name}" supprimé avec succès',
    ),
    row_fields=("images",),
)

PRODUCTS = EntityView(
    key="products",
    slug="marketplace",
    nav_label="Marketplace",
    title_field="name",
    create_schema=ProductCreate,
    update_schema=ProductUpdate,
    chain=FilterChain(
        search_fields=("name", "description"),
        filters=(
            CITY_FILTER,
            CategoricalFilter("category", "category", PRODUCT_CATEGORIES),
        ),
    ),
    messages=Messages(
        created="Produit ajouté avec succès !",
        create_error="Erreur lors de l'ajout du produit",
        load_error="Erreur lors du chargement des produits",
        deleted='Produit "{name}" supprimé avec succès',
    ),
    row_fields=("images",),
)

EVENTS = EntityView(
    key="events",
    slug="events",
    nav_label="Événements",
    title_field="title",
    create_schema=EventCreate,
    update_schema=EventUpdate,
    chain=FilterChain(
        search_fields=("title", "description", "location"),
        filters=(CITY_FILTER,),
    ),
    messages=Messages(
        created="Événement ajouté avec succès !",
        create_error="Erreur lors de l'ajout de l'événement",
        load_error="Erreur lors du chargement des événements",
        deleted='Événement "{name}" supprimé avec succès',
        created_description=(
            "Une notification sera envoyée aux utilisateurs de l'app mobile"
        ),
        scheduled_description=(
            "Les utilisateurs recevront une notification pour ce nouvel événement"
        ),
    ),
    push_notification=True,
)

JOB_OFFERS = EntityView(
    key="job_offers",
    slug="jobs",
    nav_label="Offres d'emploi",
    title_field="title",
    create_schema=JobOfferCreate,
    update_schema=JobOfferUpdate,
    chain=FilterChain(
        search_fields=("title", "company", "description"),
        filters=(
            CITY_FILTER,
            CategoricalFilter("type", "type", JOB_TYPES),
        ),
    ),
    messages=Messages(
        created="Offre d'emploi ajoutée avec succès !",
        create_error="Erreur lors de l'ajout de l'offre d'emploi",
        load_error="Erreur lors du chargement des offres d'emploi",
        deleted="Offre d'emploi \"{name}\" supprimée avec succès",
        created_description=(
            "Une notification sera envoyée aux utilisateurs de l'app mobile"
        ),
        scheduled_description=(
            "Les utilisateurs recevront une notification pour cette nouvelle "
            "offre d'emploi"
        ),
    ),
    row_fields=("requirements",),
    push_notification=True,
)

PUBLIC_SERVICES = EntityView(
    key="public_services",
    slug="public-services",
    nav_label="Services publics",
    title_field="name",
    create_schema=PublicServiceCreate,
    update_schema=PublicServiceUpdate,
    chain=FilterChain(
        search_fields=("name", "description", "address"),
        filters=(
            CITY_FILTER,
            CategoricalFilter("category", "category", PUBLIC_SERVICE_CATEGORIES),
        ),
    ),
    messages=Messages(
        created="Service public ajouté avec succès !",
        create_error="Erreur lors de l'ajout du service public",
        load_error="Erreur lors du chargement des services publics",
        deleted='Service public "{name}" supprimé avec succès',
    ),
)

ANNOUNCEMENTS = EntityView(
    key="announcements",
    slug="announcements",
    nav_label="Annonces",
    title_field="title",
    create_schema=AnnouncementCreate,
    update_schema=AnnouncementUpdate,
    chain=FilterChain(
        search_fields=("title", "description"),
        filters=(
            CITY_FILTER,
            CategoricalFilter("category", "category", ANNOUNCEMENT_CATEGORIES),
        ),
    ),
    messages=Messages(
        created="Annonce ajoutée avec succès !",
        create_error="Erreur lors de l'ajout de l'annonce",
        load_error="Erreur lors du chargement des annonces",
        deleted='Annonce "{name}" supprimée avec succès',
    ),
)

# Sidebar order
ENTITY_VIEWS: tuple[EntityView, ...] = (
    PHARMACIES,
    HOTELS,
    PRODUCTS,
    EVENTS,
    JOB_OFFERS,
    PUBLIC_SERVICES,
    ANNOUNCEMENTS,
)

"""
constants.py — closed vocabularies shared by the models, the views and the API.

Every enumerated field of the seven entities draws its values from one of
the typed literals below. The tuple forms are what the API exposes as
select options and what the validators check against.
"""

from __future__ import annotations

from typing import Final, Literal, get_args

# ---------------------------------------------------------------------------
# Typed literals
# ---------------------------------------------------------------------------
City = Literal[
    "Agboville",
    "Tiassalé",
    "Azaguié",
    "Sikensi",
    "Taabo",
    "Grand morié",
    "Yapo",
    "Aboudé",
]

PriceRange = Literal[
    "Budget (< 15.000 FCFA)",
    "Moyen (15.000 - 35.000 FCFA)",
    "Premium (35.000 - 60.000 FCFA)",
    "Luxe (> 60.000 FCFA)",
]

Amenity = Literal[
    "WiFi gratuit",
    "Climatisation",
    "Parking",
    "Piscine",
    "Restaurant",
    "Bar",
    "Salle de sport",
    "Spa",
    "Room service",
    "Petit-déjeuner inclus",
    "Blanchisserie",
    "Réception 24h/24",
]

ProductCategory = Literal[
    "Électronique",
    "Mode & Vêtements",
    "Maison & Jardin",
    "Véhicules",
    "Immobilier",
    "Sport & Loisirs",
    "Livres & Médias",
    "Alimentation",
    "Santé & Beauté",
    "Autres",
]

JobType = Literal["CDI", "CDD", "Stage", "Freelance", "Temps partiel", "Saisonnier"]

PublicServiceCategory = Literal[
    "Mairie",
    "Préfecture",
    "Hôpital",
    "École",
    "Police",
    "Pompiers",
    "Poste",
    "Banque",
    "Transport",
    "Autres",
]

AnnouncementCategory = Literal[
    "Électricien",
    "Plombier",
    "Maçon",
    "Menuisier",
    "Peintre",
    "Mécanicien",
    "Informaticien",
    "Coiffeur",
    "Couturier",
    "Nettoyage",
    "Jardinage",
    "Autres",
]

# ---------------------------------------------------------------------------
# Option lists (same order as shown in the dashboard selects)
# ---------------------------------------------------------------------------
CITIES: Final[tuple[str, ...]] = get_args(City)
PRICE_RANGES: Final[tuple[str, ...]] = get_args(PriceRange)
AMENITIES: Final[tuple[str, ...]] = get_args(Amenity)
PRODUCT_CATEGORIES: Final[tuple[str, ...]] = get_args(ProductCategory)
JOB_TYPES: Final[tuple[str, ...]] = get_args(JobType)
PUBLIC_SERVICE_CATEGORIES: Final[tuple[str, ...]] = get_args(PublicServiceCategory)
ANNOUNCEMENT_CATEGORIES: Final[tuple[str, ...]] = get_args(AnnouncementCategory)

# ---------------------------------------------------------------------------
# Table names — one per entity
# ---------------------------------------------------------------------------
TABLES: Final[dict[str, str]] = {
    "pharmacies": "pharmacies",
    "hotels": "hotels",
    "products": "products",
    "events": "events",
    "job_offers": "job_offers",
    "public_services": "public_services",
    "announcements": "announcements",
}

# Sentinel used by every categorical filter to mean "no filter"
ALL: Final[str] = "all"

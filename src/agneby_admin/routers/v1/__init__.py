from fastapi import APIRouter

from agneby_admin.routers.v1 import auth, dashboard, hotels, meta, pharmacies
from agneby_admin.routers.v1.entities import build_entity_router
from agneby_admin.views.registry import ENTITY_VIEWS

v1_router = APIRouter(prefix="/v1")

v1_router.include_router(auth.router)
v1_router.include_router(dashboard.router)
v1_router.include_router(meta.router)

# Entity-specific routes go first so "/on-duty" and "/images" are not
# captured by the generic "/{document_id}" routes.
v1_router.include_router(pharmacies.router)
v1_router.include_router(hotels.router)
for _entity in ENTITY_VIEWS:
    v1_router.include_router(build_entity_router(_entity))

"""Hotel image uploads."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Query, UploadFile
from fastapi.responses import JSONResponse

from agneby_admin.dependencies import get_notifier, get_storage, require_auth
from agneby_admin.responses import error_response, failure_response, wrap_response
from agneby_admin.storage import DisabledStorage, ImageFile, ImageStorage
from agneby_admin.views.notifications import Notifier
from agneby_admin.views.registry import HOTELS

router = APIRouter(
    prefix=f"/{HOTELS.slug}",
    tags=[HOTELS.slug],
    dependencies=[Depends(require_auth)],
)


@router.post("/{hotel_id}/images", status_code=201)
async def upload_images(
    hotel_id: str,
    files: list[UploadFile] = File(...),
    storage: ImageStorage | DisabledStorage = Depends(get_storage),
    notifier: Notifier = Depends(get_notifier),
):
    images = [
        ImageFile(
            filename=f.filename or "image",
            content=await f.read(),
            content_type=f.content_type,
        )
        for f in files
    ]
    try:
        urls = await storage.upload_images(images, folder="hotels", owner_id=hotel_id)
    except Exception as exc:
        notifier.error("Erreur lors de l'upload de l'image")
        return failure_response(exc, notifier)
    return wrap_response({"urls": urls}, total_count=len(urls))


@router.delete("/images")
async def delete_image(
    url: str = Query(..., description="Public URL of the image"),
    storage: ImageStorage | DisabledStorage = Depends(get_storage),
    notifier: Notifier = Depends(get_notifier),
):
    try:
        storage.delete_image(url)
    except ValueError as exc:
        return JSONResponse(
            status_code=400, content=error_response("INVALID_IMAGE_URL", str(exc))
        )
    except Exception as exc:
        notifier.error("Erreur lors de la suppression de l'image")
        return failure_response(exc, notifier)
    return wrap_response({"url": url, "deleted": True})

"""
storage.py — image uploads to a Supabase storage bucket.

Objects are written under ``<folder>/<owner_id>/<epoch_ms>-<filename>``
and referenced everywhere else by their public URL.

Usage:
    storage = build_storage(client, settings.supabase_storage_bucket)
    url = storage.upload_image(data, "facade.jpg", folder="hotels", owner_id=hotel_id)
    storage.delete_image(url)
"""

from __future__ import annotations

import asyncio
import mimetypes
import time
from dataclasses import dataclass
from urllib.parse import unquote, urlsplit

import structlog
from supabase import Client

from agneby_shared.errors import ConfigurationError

log = structlog.get_logger(__name__)


@dataclass
class ImageFile:
    filename: str
    content: bytes
    content_type: str | None = None


class ImageStorage:
    """Upload, delete and resolve public URLs in one bucket."""

    def __init__(self, client: Client, bucket: str) -> None:
        self._client = client
        self.bucket = bucket

    def _bucket(self):
        return self._client.storage.from_(self.bucket)

    @staticmethod
    def object_path(folder: str, owner_id: str, filename: str) -> str:
        stamp = int(time.time() * 1000)
        safe_name = filename.replace("/", "_").strip() or "image"
        return f"{folder}/{owner_id}/{stamp}-{safe_name}"

    def path_from_url(self, public_url: str) -> str:
        """Recover the object path from a public URL of this bucket."""
        marker = f"/object/public/{self.bucket}/"
        path = urlsplit(public_url).path
        if marker not in path:
            raise ValueError(f"Not a public URL of bucket {self.bucket!r}: {public_url}")
        return unquote(path.split(marker, 1)[1])

    def upload_image(
        self,
        content: bytes,
        filename: str,
        *,
        folder: str,
        owner_id: str,
        content_type: str | None = None,
    ) -> str:
        path = self.object_path(folder, owner_id, filename)
        content_type = (
            content_type
            or mimetypes.guess_type(filename)[0]
            or "application/octet-stream"
        )
        try:
            self._bucket().upload(
                path=path,
                file=content,
                file_options={"content-type": content_type},
            )
        except Exception as exc:
            log.error("image_upload_failed", path=path, error=str(exc))
            raise
        url = self._bucket().get_public_url(path)
        log.info("image_uploaded", path=path, size=len(content))
        return url.rstrip("?")

    async def upload_images(
        self, files: list[ImageFile], *, folder: str, owner_id: str
    ) -> list[str]:
        """Upload several files concurrently; fails if any upload fails."""
        tasks = [
            asyncio.to_thread(
                self.upload_image,
                f.content,
                f.filename,
                folder=folder,
                owner_id=owner_id,
                content_type=f.content_type,
            )
            for f in files
        ]
        return list(await asyncio.gather(*tasks))

    def delete_image(self, public_url: str) -> None:
        path = self.path_from_url(public_url)
        try:
            self._bucket().remove([path])
        except Exception as exc:
            log.error("image_delete_failed", path=path, error=str(exc))
            raise
        log.info("image_deleted", path=path)


class DisabledStorage:
    """Demo-mode storage: every call raises ConfigurationError."""

    bucket = None

    def upload_image(self, content: bytes, filename: str, **kwargs) -> str:
        raise ConfigurationError()

    async def upload_images(self, files: list[ImageFile], **kwargs) -> list[str]:
        raise ConfigurationError()

    def delete_image(self, public_url: str) -> None:
        raise ConfigurationError()


def build_storage(client: Client | None, bucket: str) -> ImageStorage | DisabledStorage:
    if client is None:
        return DisabledStorage()
    return ImageStorage(client, bucket)

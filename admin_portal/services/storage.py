"""
Image storage client backed by Cloudinary.

Only upload and destroy are needed; media registry rows are managed
separately and never cascade here.
"""
from functools import lru_cache
from typing import Dict

import cloudinary
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from ..config import Settings, get_settings
from ..logging_config import storage_logger
from .exceptions import StorageError


class ImageStorage:
    def __init__(self, settings: Settings):
        self.settings = settings
        if self.is_configured():
            cloudinary.config(
                cloud_name=settings.cloudinary_cloud_name,
                api_key=settings.cloudinary_api_key,
                api_secret=settings.cloudinary_api_secret,
                secure=True,
            )

    def is_configured(self) -> bool:
        s = self.settings
        return bool(s.cloudinary_cloud_name and s.cloudinary_api_key and s.cloudinary_api_secret)

    def _require_config(self) -> None:
        if not self.is_configured():
            raise StorageError("Image storage is not configured")

    def upload(self, file: str) -> Dict[str, str]:
        """Upload a data URI or remote URL; returns the public URL and storage id."""
        self._require_config()
        try:
            result = cloudinary.uploader.upload(file, folder=self.settings.cloudinary_folder)
        except CloudinaryError as e:
            storage_logger.error("Image upload failed", error=e)
            raise StorageError()

        storage_logger.info("Image uploaded", public_id=result.get("public_id"))
        return {"url": result["secure_url"], "public_id": result["public_id"]}

    def destroy(self, public_id: str) -> str:
        self._require_config()
        try:
            result = cloudinary.uploader.destroy(public_id)
        except CloudinaryError as e:
            storage_logger.error("Image destroy failed", error=e, public_id=public_id)
            raise StorageError()

        storage_logger.info("Image destroyed", public_id=public_id, result=result.get("result"))
        return result.get("result", "")


@lru_cache()
def get_storage() -> ImageStorage:
    return ImageStorage(get_settings())

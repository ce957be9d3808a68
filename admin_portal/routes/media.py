"""
Media registry routes plus the image storage upload/delete endpoints.

Deleting a registry row does not remove the stored image; the dashboard
calls DELETE /api/delete with the public_id for that.
"""
from fastapi import APIRouter, Depends

from ..responses import success
from ..schemas.media import (
    MediaCreate,
    MediaUpdate,
    MediaResponse,
    StorageDeleteRequest,
    UploadRequest,
    UploadResponse,
)
from ..services.entities import media_service
from ..services.storage import ImageStorage, get_storage
from .crud import crud_router

router = crud_router(
    media_service,
    prefix="/api/media",
    tags=["media"],
    response_schema=MediaResponse,
    create_schema=MediaCreate,
    update_schema=MediaUpdate,
)

storage_router = APIRouter(prefix="/api", tags=["media"])


@storage_router.post("/upload")
def upload_image(body: UploadRequest, storage: ImageStorage = Depends(get_storage)):
    """Upload an image to storage and return its public URL and id."""
    result = storage.upload(body.file)
    return success(UploadResponse(**result).model_dump())


@storage_router.delete("/delete")
def delete_image(body: StorageDeleteRequest, storage: ImageStorage = Depends(get_storage)):
    """Remove an image from storage by its public id."""
    result = storage.destroy(body.public_id)
    return success({"result": result}, "Image deleted")

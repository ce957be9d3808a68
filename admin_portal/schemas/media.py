from pydantic import BaseModel
from typing import Optional

from .common import EntityResponse, HttpUrlStr


class MediaCreate(BaseModel):
    url: HttpUrlStr
    public_id: Optional[str] = None
    title: Optional[str] = None


class MediaUpdate(BaseModel):
    url: Optional[HttpUrlStr] = None
    public_id: Optional[str] = None
    title: Optional[str] = None


class MediaResponse(EntityResponse):
    url: str
    public_id: Optional[str] = None
    title: Optional[str] = None


class UploadRequest(BaseModel):
    file: str  # data URI or remote URL


class UploadResponse(BaseModel):
    url: str
    public_id: str


class StorageDeleteRequest(BaseModel):
    public_id: str

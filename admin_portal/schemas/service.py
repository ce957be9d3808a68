from pydantic import BaseModel
from typing import Optional

from .common import CategorySummary, EntityResponse


class ServiceCreate(BaseModel):
    title: str
    description: str
    image: Optional[str] = None
    cursor1: Optional[str] = None
    cursor2: Optional[str] = None
    category_id: Optional[str] = None


class ServiceUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    cursor1: Optional[str] = None
    cursor2: Optional[str] = None
    category_id: Optional[str] = None


class ServiceResponse(EntityResponse):
    title: str
    description: str
    image: Optional[str] = None
    cursor1: Optional[str] = None
    cursor2: Optional[str] = None
    category_id: Optional[str] = None
    category: Optional[CategorySummary] = None

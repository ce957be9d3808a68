"""Team members and testimonials."""
from pydantic import BaseModel
from typing import Optional

from .common import EntityResponse


class PersonCreate(BaseModel):
    name: str
    role: str
    image: Optional[str] = None
    description: Optional[str] = None


class PersonUpdate(BaseModel):
    name: Optional[str] = None
    role: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None


class PersonResponse(EntityResponse):
    name: str
    role: str
    image: Optional[str] = None
    description: Optional[str] = None

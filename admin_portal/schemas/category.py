from pydantic import BaseModel
from typing import List, Optional

from .common import BlogSummary, EntityResponse


class CategoryCreate(BaseModel):
    name: str
    category_for: Optional[str] = None


class CategoryUpdate(BaseModel):
    name: Optional[str] = None
    category_for: Optional[str] = None


class CategoryResponse(EntityResponse):
    name: str
    category_for: Optional[str] = None
    blogs: List[BlogSummary] = []

from pydantic import BaseModel
from typing import List, Optional

from .auth import UserResponse
from .common import CategorySummary, EntityResponse, HttpUrlStr


class BlogCreate(BaseModel):
    title: str
    content: str
    published: bool = False
    tags: List[str] = []
    url: Optional[HttpUrlStr] = None
    category_id: Optional[str] = None
    author_id: Optional[str] = None


class BlogUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    published: Optional[bool] = None
    tags: Optional[List[str]] = None
    url: Optional[HttpUrlStr] = None
    category_id: Optional[str] = None
    author_id: Optional[str] = None


class BlogResponse(EntityResponse):
    title: str
    content: str
    published: bool
    tags: List[str] = []
    url: Optional[str] = None
    category_id: Optional[str] = None
    author_id: Optional[str] = None
    category: Optional[CategorySummary] = None
    author: Optional[UserResponse] = None

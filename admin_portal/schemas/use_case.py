from pydantic import BaseModel
from typing import Optional

from .auth import UserResponse
from .common import EntityResponse


class UseCaseCreate(BaseModel):
    title: str
    description: str
    image: Optional[str] = None


class UseCaseUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None


class UseCaseResponse(EntityResponse):
    title: str
    description: str
    image: Optional[str] = None
    user_id: str
    user: Optional[UserResponse] = None

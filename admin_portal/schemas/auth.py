from pydantic import BaseModel, EmailStr, Field
from typing import Literal, Optional

from .common import EntityResponse

Role = Literal["admin", "manager", "contributor"]
Status = Literal["pending", "active", "disabled"]


class SignUpRequest(BaseModel):
    email: EmailStr
    username: str = Field(min_length=1)
    role: Role


class SignInRequest(BaseModel):
    email: EmailStr
    password: str


class InviteRequest(BaseModel):
    email: EmailStr
    username: Optional[str] = None
    role: Optional[Role] = None


class TokenRequest(BaseModel):
    token: str = Field(min_length=1)


class SetPasswordRequest(BaseModel):
    token: str = Field(min_length=1)
    password: str = Field(min_length=8)


class UserResponse(EntityResponse):
    email: str
    username: str
    role: str
    status: str


class UserUpdate(BaseModel):
    username: Optional[str] = None
    role: Optional[Role] = None
    status: Optional[Status] = None

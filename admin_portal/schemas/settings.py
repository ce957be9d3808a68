from pydantic import BaseModel
from typing import Literal, Optional

from .common import EntityResponse, HttpUrlStr

Mode = Literal["light", "dark", "system"]


class SettingCreate(BaseModel):
    site_name: Optional[str] = None
    site_url: Optional[HttpUrlStr] = None
    site_logo: Optional[str] = None
    site_favicon: Optional[str] = None
    mode: Mode = "system"


class SettingUpdate(BaseModel):
    site_name: Optional[str] = None
    site_url: Optional[HttpUrlStr] = None
    site_logo: Optional[str] = None
    site_favicon: Optional[str] = None
    mode: Optional[Mode] = None


class SettingResponse(EntityResponse):
    site_name: Optional[str] = None
    site_url: Optional[str] = None
    site_logo: Optional[str] = None
    site_favicon: Optional[str] = None
    mode: str

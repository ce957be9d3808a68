"""
Site settings routes. GET always returns a list; an empty list means the
site has not been configured yet.
"""
from ..schemas.settings import SettingCreate, SettingUpdate, SettingResponse
from ..services.entities import setting_service
from .crud import crud_router

router = crud_router(
    setting_service,
    prefix="/api/settings",
    tags=["settings"],
    response_schema=SettingResponse,
    create_schema=SettingCreate,
    update_schema=SettingUpdate,
)

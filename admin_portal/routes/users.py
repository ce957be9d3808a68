"""
User administration routes. Accounts are created through sign-up or invites.
"""
from ..schemas.auth import UserResponse, UserUpdate
from ..services.entities import user_service
from .crud import crud_router

router = crud_router(
    user_service,
    prefix="/api/users",
    tags=["users"],
    response_schema=UserResponse,
    update_schema=UserUpdate,
)

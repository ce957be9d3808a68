"""
Use case routes. New use cases belong to the signed-in user.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth import get_required_user
from ..database import get_db
from ..models.user import User
from ..responses import success
from ..schemas.use_case import UseCaseCreate, UseCaseUpdate, UseCaseResponse
from ..services.entities import use_case_service
from .crud import crud_router, to_data

router = APIRouter(prefix="/api/use-case", tags=["use-case"])


@router.post("", status_code=201)
def create_use_case(
    payload: UseCaseCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_user),
):
    """Create a use case owned by the session user."""
    data = payload.model_dump()
    data["user_id"] = current_user.id
    use_case = use_case_service.create(db, data)
    return success(to_data(UseCaseResponse, use_case), "Use case created")


crud_router(
    use_case_service,
    prefix="/api/use-case",
    tags=["use-case"],
    response_schema=UseCaseResponse,
    update_schema=UseCaseUpdate,
    router=router,
)

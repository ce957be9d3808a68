"""
Team member and testimonial routes.
"""
from ..schemas.people import PersonCreate, PersonUpdate, PersonResponse
from ..services.entities import team_service, testimonial_service
from .crud import crud_router

team_router = crud_router(
    team_service,
    prefix="/api/team",
    tags=["team"],
    response_schema=PersonResponse,
    create_schema=PersonCreate,
    update_schema=PersonUpdate,
)

testimonial_router = crud_router(
    testimonial_service,
    prefix="/api/testimonial",
    tags=["testimonial"],
    response_schema=PersonResponse,
    create_schema=PersonCreate,
    update_schema=PersonUpdate,
)

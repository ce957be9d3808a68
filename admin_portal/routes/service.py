"""
Service routes. List with ?category_id= to narrow by category.
"""
from ..schemas.service import ServiceCreate, ServiceUpdate, ServiceResponse
from ..services.entities import service_service
from .crud import crud_router

router = crud_router(
    service_service,
    prefix="/api/service",
    tags=["service"],
    response_schema=ServiceResponse,
    create_schema=ServiceCreate,
    update_schema=ServiceUpdate,
)

"""
Category routes. List with ?category_for=blog|service|porfolio.
"""
from ..schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse
from ..services.entities import category_service
from .crud import crud_router

router = crud_router(
    category_service,
    prefix="/api/category",
    tags=["category"],
    response_schema=CategoryResponse,
    create_schema=CategoryCreate,
    update_schema=CategoryUpdate,
)

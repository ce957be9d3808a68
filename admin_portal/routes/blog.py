"""
Blog routes. Responses include the author and category.
"""
from ..schemas.blog import BlogCreate, BlogUpdate, BlogResponse
from ..services.entities import blog_service
from .crud import crud_router

router = crud_router(
    blog_service,
    prefix="/api/blog",
    tags=["blog"],
    response_schema=BlogResponse,
    create_schema=BlogCreate,
    update_schema=BlogUpdate,
)

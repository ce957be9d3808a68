from .auth import router as auth_router
from .blog import router as blog_router
from .category import router as category_router
from .health import router as health_router
from .media import router as media_router, storage_router
from .portfolio import router as portfolio_router
from .service import router as service_router
from .settings import router as settings_router
from .team import team_router, testimonial_router
from .use_case import router as use_case_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "blog_router",
    "category_router",
    "health_router",
    "media_router",
    "storage_router",
    "portfolio_router",
    "service_router",
    "settings_router",
    "team_router",
    "testimonial_router",
    "use_case_router",
    "users_router",
]

"""
Admin Portal API - FastAPI application entry point.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from .config import get_settings
from .database import engine, Base
from .middleware import SessionGateMiddleware, SecurityHeadersMiddleware, RequestLoggingMiddleware
from .limiter import limiter
from .responses import register_exception_handlers
from . import models  # noqa: F401  (registers tables on Base.metadata)
from .routes import (
    auth_router,
    blog_router,
    category_router,
    health_router,
    media_router,
    storage_router,
    portfolio_router,
    service_router,
    settings_router,
    team_router,
    testimonial_router,
    use_case_router,
    users_router,
)

settings = get_settings()

# Create tables (in production, use Alembic migrations instead)
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title=settings.app_name,
    description="Backend API for the content admin dashboard",
    version="1.0.0",
    docs_url="/api/docs" if settings.debug else None,
    redoc_url="/api/redoc" if settings.debug else None,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
register_exception_handlers(app)

# Last added runs first: CORS -> security headers -> request log -> session gate
app.add_middleware(SessionGateMiddleware)

# Request logging middleware (only in debug mode)
if settings.debug:
    app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(SecurityHeadersMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=[
        "Authorization",
        "Content-Type",
        "Accept",
        "Origin",
        "X-Requested-With",
    ],
    max_age=3600,  # Cache preflight requests for 1 hour
)

# Routes
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(category_router)
app.include_router(blog_router)
app.include_router(portfolio_router)
app.include_router(service_router)
app.include_router(team_router)
app.include_router(testimonial_router)
app.include_router(use_case_router)
app.include_router(media_router)
app.include_router(storage_router)
app.include_router(settings_router)


@app.get("/")
def root():
    """Service banner."""
    return {
        "message": settings.app_name,
        "docs": "/api/docs" if settings.debug else "Disabled in production",
    }


def run_server():
    """Run the API server"""
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run_server()

"""
Health check for load balancers and monitoring.
"""
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import get_settings
from ..database import get_db
from ..logging_config import db_logger

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("")
def health_check(db: Session = Depends(get_db)):
    """Report API and database status."""
    settings = get_settings()
    try:
        db.execute(text("SELECT 1"))
        database = "healthy"
    except SQLAlchemyError as e:
        db_logger.error("Database health check failed", error=e)
        database = "unhealthy"

    return {
        "status": "healthy" if database == "healthy" else "degraded",
        "database": database,
        "environment": settings.environment,
        "version": "1.0.0",
    }

"""
Portfolio routes. Create and update take multipart form fields:
title, description, technologies (comma separated), live_url, repo_url,
category_id and repeated images (screenshot URLs).
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Form, Query
from pydantic import ValidationError as SchemaError
from sqlalchemy.orm import Session

from ..database import get_db
from ..responses import success
from ..schemas.portfolio import PortfolioCreate, PortfolioUpdate, PortfolioResponse, split_technologies
from ..services.entities import portfolio_service
from ..services.exceptions import ValidationError
from .crud import crud_router, to_data

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])


@router.post("", status_code=201)
def create_portfolio(
    title: str = Form(""),
    description: str = Form(""),
    technologies: str = Form(""),
    live_url: Optional[str] = Form(None),
    repo_url: Optional[str] = Form(None),
    category_id: Optional[str] = Form(None),
    images: List[str] = Form([]),
    db: Session = Depends(get_db),
):
    """Create a portfolio with its screenshots."""
    try:
        payload = PortfolioCreate(
            title=title,
            description=description,
            technologies=split_technologies(technologies),
            live_demo_url=live_url,
            github_url=repo_url,
            category_id=category_id or None,
            images=images,
        )
    except SchemaError:
        raise ValidationError("Missing required fields: title, description, technologies")

    portfolio = portfolio_service.create(db, payload.model_dump())
    return success(to_data(PortfolioResponse, portfolio), "Portfolio created")


@router.patch("")
def update_portfolio(
    portfolio_id: str = Query(..., alias="id"),
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    technologies: Optional[str] = Form(None),
    live_url: Optional[str] = Form(None),
    repo_url: Optional[str] = Form(None),
    category_id: Optional[str] = Form(None),
    images: List[str] = Form([]),
    db: Session = Depends(get_db),
):
    """Update supplied fields; new images replace every existing screenshot."""
    changes = {
        "title": title,
        "description": description,
        "technologies": split_technologies(technologies) if technologies is not None else None,
        "live_demo_url": live_url,
        "github_url": repo_url,
        "category_id": category_id or None,
        "images": images or None,
    }
    try:
        payload = PortfolioUpdate(**{key: value for key, value in changes.items() if value is not None})
    except SchemaError:
        raise ValidationError()

    portfolio = portfolio_service.update(db, portfolio_id, payload.model_dump(exclude_unset=True))
    return success(to_data(PortfolioResponse, portfolio), "Portfolio updated")


crud_router(
    portfolio_service,
    prefix="/api/portfolio",
    tags=["portfolio"],
    response_schema=PortfolioResponse,
    router=router,
)

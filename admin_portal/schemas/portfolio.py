from pydantic import BaseModel
from typing import List, Optional

from .common import CategorySummary, EntityResponse, HttpUrlStr


def split_technologies(raw: Optional[str]) -> List[str]:
    """'React, Next.js,,Tailwind' -> ['React', 'Next.js', 'Tailwind']"""
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


class PortfolioCreate(BaseModel):
    title: str
    description: str
    technologies: List[str]
    live_demo_url: Optional[HttpUrlStr] = None
    github_url: Optional[HttpUrlStr] = None
    category_id: Optional[str] = None
    images: List[HttpUrlStr] = []


class PortfolioUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    technologies: Optional[List[str]] = None
    live_demo_url: Optional[HttpUrlStr] = None
    github_url: Optional[HttpUrlStr] = None
    category_id: Optional[str] = None
    images: Optional[List[HttpUrlStr]] = None


class ScreenshotResponse(BaseModel):
    id: str
    url: str

    class Config:
        from_attributes = True


class PortfolioResponse(EntityResponse):
    title: str
    description: str
    technologies: List[str] = []
    live_demo_url: Optional[str] = None
    github_url: Optional[str] = None
    category_id: Optional[str] = None
    category: Optional[CategorySummary] = None
    screenshots: List[ScreenshotResponse] = []

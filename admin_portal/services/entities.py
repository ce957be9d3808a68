"""
Service instances for every content entity.
"""
from typing import Any, Dict

from sqlalchemy.orm import Session

from ..models import (
    Blog,
    Category,
    Media,
    Portfolio,
    Screenshot,
    Service,
    Setting,
    Team,
    Testimonial,
    UseCase,
    User,
)
from .crud import EntityService, Relation

CATEGORY = Relation(field="category_id", attribute="category", model=Category, label="Category")


class PortfolioService(EntityService[Portfolio]):
    """Portfolios own their screenshots and replace them wholesale."""

    def _split_children(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        images = payload.pop("images", None)
        return {"images": images} if images else {}

    def _apply_children(self, db: Session, entity: Portfolio, children: Dict[str, Any]) -> None:
        images = children.get("images")
        if not images:
            return
        db.query(Screenshot).filter(Screenshot.portfolio_id == entity.id).delete(synchronize_session=False)
        db.add_all(
            Screenshot(portfolio_id=entity.id, url=url, position=position)
            for position, url in enumerate(images)
        )
        db.expire(entity, ["screenshots"])

    def _before_delete(self, db: Session, entity: Portfolio) -> None:
        db.query(Screenshot).filter(Screenshot.portfolio_id == entity.id).delete(synchronize_session=False)
        db.expire(entity, ["screenshots"])


category_service = EntityService(
    Category,
    "Category",
    required=("name",),
    filters=("category_for",),
)

blog_service = EntityService(
    Blog,
    "Blog",
    required=("title", "content"),
    relations=(
        CATEGORY,
        Relation(field="author_id", attribute="author", model=User, label="Author"),
    ),
    filters=("category_id", "author_id"),
)

portfolio_service = PortfolioService(
    Portfolio,
    "Portfolio",
    required=("title", "description", "technologies"),
    relations=(CATEGORY,),
    filters=("category_id",),
)

service_service = EntityService(
    Service,
    "Service",
    required=("title", "description"),
    relations=(CATEGORY,),
    filters=("category_id",),
)

team_service = EntityService(Team, "Team member", required=("name", "role"))

testimonial_service = EntityService(Testimonial, "Testimonial", required=("name", "role"))

use_case_service = EntityService(
    UseCase,
    "Use case",
    required=("title", "description"),
    relations=(Relation(field="user_id", attribute="user", model=User, label="User"),),
    filters=("user_id",),
)

media_service = EntityService(Media, "Media", required=("url",))

setting_service = EntityService(Setting, "Setting", newest_first=False)

user_service = EntityService(
    User,
    "User",
    required=("email", "username", "role"),
    filters=("status", "role"),
)

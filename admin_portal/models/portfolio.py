"""
Portfolio project and its screenshots.
"""
from sqlalchemy import Column, Integer, String, DateTime, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from ..database import Base, new_id


class Portfolio(Base):
    __tablename__ = "portfolios"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    technologies = Column(JSON, default=list)
    live_demo_url = Column(String(1000), nullable=True)
    github_url = Column(String(1000), nullable=True)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=True, index=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # Relationships
    category = relationship("Category", back_populates="portfolios")
    # Screenshots are removed explicitly by the portfolio service, never by the ORM
    screenshots = relationship(
        "Screenshot",
        back_populates="portfolio",
        order_by="Screenshot.position",
        passive_deletes=True,
    )


class Screenshot(Base):
    __tablename__ = "screenshots"

    id = Column(String(36), primary_key=True, default=new_id)
    portfolio_id = Column(String(36), ForeignKey("portfolios.id"), nullable=False, index=True)
    url = Column(String(1000), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    # Relationships
    portfolio = relationship("Portfolio", back_populates="screenshots")

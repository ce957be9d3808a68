"""
Category model, partitioned by the domain that owns it.
"""
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from ..database import Base, new_id


class Category(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    category_for = Column(String(50), nullable=True, index=True)  # blog, service, porfolio
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # Relationships
    blogs = relationship("Blog", back_populates="category", order_by="Blog.created_at.desc()")
    services = relationship("Service", back_populates="category")
    portfolios = relationship("Portfolio", back_populates="category")

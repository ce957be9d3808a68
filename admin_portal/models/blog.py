"""
Blog post model.
"""
from sqlalchemy import Column, String, DateTime, Text, Boolean, JSON, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from ..database import Base, new_id


class Blog(Base):
    __tablename__ = "blogs"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)  # rich HTML
    published = Column(Boolean, default=False, index=True)
    tags = Column(JSON, default=list)
    url = Column(String(1000), nullable=True)  # cover image
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=True, index=True)
    author_id = Column(String(36), ForeignKey("users.id"), nullable=True, index=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # Relationships
    category = relationship("Category", back_populates="blogs")
    author = relationship("User", back_populates="blogs")

"""
Team member and testimonial models share the same shape.
"""
from sqlalchemy import Column, String, DateTime, Text
from datetime import datetime, timezone
from ..database import Base, new_id


class Team(Base):
    __tablename__ = "team_members"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    role = Column(String(100), nullable=False)
    image = Column(String(1000), nullable=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))


class Testimonial(Base):
    __tablename__ = "testimonials"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    role = Column(String(100), nullable=False)
    image = Column(String(1000), nullable=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

"""
Media registry entry for an asset held in external image storage.
"""
from sqlalchemy import Column, String, DateTime
from datetime import datetime, timezone
from ..database import Base, new_id


class Media(Base):
    __tablename__ = "media"

    id = Column(String(36), primary_key=True, default=new_id)
    url = Column(String(1000), nullable=False)
    public_id = Column(String(255), nullable=True, index=True)
    title = Column(String(255), nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

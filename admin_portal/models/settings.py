"""
Site-wide settings. Callers treat the first row as the configuration.
"""
from sqlalchemy import Column, String, DateTime
from datetime import datetime, timezone
from ..database import Base, new_id

SITE_MODES = ("light", "dark", "system")


class Setting(Base):
    __tablename__ = "settings"

    id = Column(String(36), primary_key=True, default=new_id)
    site_name = Column(String(255), nullable=True)
    site_url = Column(String(1000), nullable=True)
    site_logo = Column(String(1000), nullable=True)
    site_favicon = Column(String(1000), nullable=True)
    mode = Column(String(10), nullable=False, default="system")  # light, dark, system
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

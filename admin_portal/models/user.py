"""
User model for staff accounts.
"""
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from ..database import Base, new_id

USER_ROLES = ("admin", "manager", "contributor")
USER_STATUSES = ("pending", "active", "disabled")


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, index=True, nullable=False)
    username = Column(String(100), nullable=False)
    role = Column(String(20), nullable=False, default="contributor")  # admin, manager, contributor
    status = Column(String(20), nullable=False, default="pending", index=True)  # pending, active, disabled
    hashed_password = Column(String(255), nullable=True)  # unset until the invite is completed
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # Relationships
    blogs = relationship("Blog", back_populates="author")
    use_cases = relationship("UseCase", back_populates="user")
    reset_tokens = relationship("PasswordResetToken", back_populates="user", cascade="all, delete-orphan")

"""
Admin database model.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, String

from evoting.core.database import Base


class Admin(Base):
    """Shared administrator credential. Only the bcrypt hash is stored."""

    __tablename__ = "admins"

    admin_id = Column(String(100), primary_key=True)
    password_hash = Column(String(255), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<Admin(admin_id='{self.admin_id}')>"

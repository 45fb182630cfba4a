"""
Voter database model.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String

from evoting.core.database import Base


class Voter(Base):
    """
    Registered voter, keyed by national identifier (CNIC).
    The CNIC is always stored in its normalised grouped form.
    """

    __tablename__ = "voters"

    id = Column(Integer, primary_key=True, autoincrement=True)
    cnic = Column(String(15), unique=True, nullable=False, index=True)

    name = Column(String(200), nullable=False)
    father_name = Column(String(200), nullable=True)
    address = Column(String(500), nullable=True)
    profile_pic_name = Column(String(500), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<Voter(id={self.id}, cnic='{self.cnic}')>"

"""
Election, Party and Candidate database models.
"""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
import enum

from evoting.core.database import Base


class ElectionStatus(str, enum.Enum):
    """Election status enumeration."""
    CREATED = "CREATED"
    RUNNING = "RUNNING"
    ENDED = "ENDED"


class Election(Base):
    """Election model representing a voting event."""

    __tablename__ = "elections"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    status = Column(
        Enum(ElectionStatus, native_enum=False, length=16),
        default=ElectionStatus.CREATED,
        nullable=False
    )

    # Lifecycle timestamps, null until the matching transition happens
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    started_at = Column(DateTime, nullable=True)
    ended_at = Column(DateTime, nullable=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    parties = relationship("Party", back_populates="election", cascade="all, delete-orphan")
    candidates = relationship("Candidate", back_populates="election", cascade="all, delete-orphan")
    votes = relationship("Vote", back_populates="election", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<Election(id={self.id}, name='{self.name}', status={self.status})>"

    @property
    def is_running(self) -> bool:
        return self.status == ElectionStatus.RUNNING

    @property
    def is_ended(self) -> bool:
        return self.status == ElectionStatus.ENDED


class Party(Base):
    """
    Party roster entry.

    ``party_code`` is the short human-chosen code (e.g. "P1") that candidates
    and votes refer to. Entries are retired by clearing ``active``, never
    deleted, so historical votes stay attributable.
    """

    __tablename__ = "parties"

    id = Column(Integer, primary_key=True, autoincrement=True)
    election_id = Column(
        Integer,
        ForeignKey("elections.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    party_code = Column(String(50), nullable=False)
    name = Column(String(200), nullable=False)
    symbol_path = Column(String(500), nullable=True)
    active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    election = relationship("Election", back_populates="parties")

    def __repr__(self) -> str:
        return f"<Party(id={self.id}, code='{self.party_code}', active={self.active})>"


class Candidate(Base):
    """Candidate roster entry, attached to a party by its code."""

    __tablename__ = "candidates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    election_id = Column(
        Integer,
        ForeignKey("elections.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    party_code = Column(String(50), nullable=False)
    name = Column(String(200), nullable=False)
    photo_path = Column(String(500), nullable=True)
    active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    election = relationship("Election", back_populates="candidates")

    def __repr__(self) -> str:
        return f"<Candidate(id={self.id}, name='{self.name}', party='{self.party_code}')>"

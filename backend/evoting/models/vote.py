"""
Vote database model.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from evoting.core.database import Base


class Vote(Base):
    """
    A single cast vote.

    The (election_id, voter_cnic) unique constraint is what guarantees one
    vote per voter per election, including under concurrent submissions.
    """

    __tablename__ = "votes"
    __table_args__ = (
        UniqueConstraint("election_id", "voter_cnic", name="uq_votes_election_voter"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    election_id = Column(
        Integer,
        ForeignKey("elections.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    voter_cnic = Column(
        String(15),
        ForeignKey("voters.cnic", ondelete="CASCADE"),
        nullable=False
    )
    party_code = Column(String(50), nullable=False)
    candidate_id = Column(
        Integer,
        ForeignKey("candidates.id"),
        nullable=False,
        index=True
    )

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    election = relationship("Election", back_populates="votes")

    def __repr__(self) -> str:
        return f"<Vote(id={self.id}, election_id={self.election_id}, candidate_id={self.candidate_id})>"

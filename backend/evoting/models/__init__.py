"""
SQLAlchemy database models.
"""
from evoting.models.election import Election, ElectionStatus, Party, Candidate
from evoting.models.vote import Vote
from evoting.models.voter import Voter
from evoting.models.admin import Admin

__all__ = [
    "Election",
    "ElectionStatus",
    "Party",
    "Candidate",
    "Vote",
    "Voter",
    "Admin",
]

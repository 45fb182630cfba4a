"""
Business logic services.
"""
from evoting.services.auth_service import AuthService
from evoting.services.election_service import ElectionService
from evoting.services.roster_service import RosterService
from evoting.services.tally_service import TallyService
from evoting.services.vote_service import VoteService
from evoting.services.voter_service import VoterService

__all__ = [
    "AuthService",
    "ElectionService",
    "RosterService",
    "TallyService",
    "VoteService",
    "VoterService",
]

"""
Vote service handling vote casting.
"""
from typing import Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from evoting.core.cnic import is_valid_cnic, normalize_cnic
from evoting.core.exceptions import ConflictError, ForbiddenError, InvalidInputError, InvalidStateError
from evoting.models.election import Candidate
from evoting.models.vote import Vote
from evoting.models.voter import Voter
from evoting.services.election_service import ElectionService


class VoteService:
    """Service for vote operations."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.elections = ElectionService(db)

    async def _get_registered_voter(self, cnic: str) -> Optional[Voter]:
        if not is_valid_cnic(cnic):
            return None
        result = await self.db.execute(
            select(Voter).where(Voter.cnic == normalize_cnic(cnic))
        )
        return result.scalar_one_or_none()

    async def cast_vote(
        self,
        cnic: str,
        election_id: int,
        party_code: str,
        candidate_id: int
    ) -> Vote:
        """
        Record one vote for a registered voter in a running election.

        Checks run in order: election exists, election is running, voter is
        registered, candidate is active in this election, party code matches
        the candidate. The final insert is guarded by the
        (election_id, voter_cnic) unique constraint, so of two concurrent
        casts by the same voter exactly one succeeds.
        """
        election = await self.elections.get_election(election_id)

        if not election.is_running:
            raise InvalidStateError("Election is not currently running")

        voter = await self._get_registered_voter(cnic)
        if not voter:
            raise ForbiddenError("You are not registered. Please register before voting.")

        result = await self.db.execute(
            select(Candidate).where(
                Candidate.id == candidate_id,
                Candidate.election_id == election.id,
                Candidate.active.is_(True)
            )
        )
        candidate = result.scalar_one_or_none()
        if not candidate:
            raise InvalidInputError("Invalid candidate for this election")

        if party_code != candidate.party_code:
            raise InvalidInputError("Candidate does not belong to the selected party")

        # Rollback expires loaded rows, so keep plain values for logging
        voter_cnic = voter.cnic
        vote = Vote(
            election_id=election.id,
            voter_cnic=voter_cnic,
            party_code=candidate.party_code,
            candidate_id=candidate.id,
        )
        self.db.add(vote)

        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning("Duplicate vote rejected for voter {} in election {}", voter_cnic, election_id)
            raise ConflictError("You have already voted in this election.")

        await self.db.refresh(vote)
        logger.info("Vote recorded in election {}", election_id)
        return vote

    async def has_voted(self, cnic: str, election_id: int) -> bool:
        """Check whether a vote exists for this voter in the election."""
        if not is_valid_cnic(cnic):
            return False

        result = await self.db.execute(
            select(Vote.id).where(
                Vote.election_id == election_id,
                Vote.voter_cnic == normalize_cnic(cnic)
            )
        )
        return result.first() is not None

"""
Tally service for counting votes once an election has ended.
"""
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import and_, func, select

from evoting.core.exceptions import ForbiddenError
from evoting.models.election import Candidate, Party
from evoting.models.vote import Vote
from evoting.services.election_service import ElectionService


class TallyService:
    """Service for vote tallying operations."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.elections = ElectionService(db)

    async def _party_names(self, election_id: int) -> Dict[str, str]:
        # Active parties win over retired ones sharing the same code
        result = await self.db.execute(
            select(Party.party_code, Party.name)
            .where(Party.election_id == election_id)
            .order_by(Party.active.asc(), Party.id.asc())
        )
        return {code: name for code, name in result.all()}

    async def get_results(self, election_id: int) -> Dict[str, Any]:
        """
        Get per-candidate vote counts for an ended election.

        Every active candidate appears once, including those with no votes,
        ordered by vote count (highest first).
        """
        election = await self.elections.get_election(election_id)

        if not election.is_ended:
            raise ForbiddenError("Results are only available after the election has ended")

        vote_count = func.count(Vote.id).label("vote_count")
        result = await self.db.execute(
            select(Candidate.id, Candidate.name, Candidate.party_code, vote_count)
            .outerjoin(
                Vote,
                and_(Vote.candidate_id == Candidate.id, Vote.election_id == election.id)
            )
            .where(Candidate.election_id == election.id, Candidate.active.is_(True))
            .group_by(Candidate.id, Candidate.name, Candidate.party_code)
            .order_by(vote_count.desc(), Candidate.id.asc())
        )
        rows = result.all()

        party_names = await self._party_names(election.id)
        total = await self.elections.count_votes(election.id)

        candidates: List[Dict[str, Any]] = [
            {
                "candidate_id": candidate_id,
                "party": party_names.get(party_code),
                "party_code": party_code,
                "name": name,
                "vote_count": count,
            }
            for candidate_id, name, party_code, count in rows
        ]

        return {
            "election_id": election.id,
            "election_name": election.name,
            "status": election.status.value,
            "total_votes": total,
            "candidates": candidates,
        }

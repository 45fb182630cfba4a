"""
Roster service: parties and candidates attached to an election.
"""
from typing import List, Optional, Tuple

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import func, select

from evoting.core.exceptions import ConflictError, NotFoundError, ValidationError
from evoting.models.election import Election, Party, Candidate
from evoting.models.vote import Vote
from evoting.services.election_service import ElectionService


def _required(value: Optional[str], field: str) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"{field} is required")
    return cleaned


class RosterService:
    """Service for roster management operations."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.elections = ElectionService(db)

    async def _get_editable_election(self, election_id: int) -> Election:
        election = await self.elections.get_election(election_id)
        if election.is_ended:
            raise ConflictError("Cannot change the roster of an ended election")
        return election

    async def _find_active_party(self, election_id: int, party_code: str) -> Optional[Party]:
        result = await self.db.execute(
            select(Party).where(
                Party.election_id == election_id,
                Party.party_code == party_code,
                Party.active.is_(True)
            )
        )
        return result.scalars().first()

    async def add_party(
        self,
        election_id: int,
        party_code: str,
        name: str,
        symbol_path: Optional[str] = None
    ) -> Party:
        """Add a party to an election that has not ended."""
        party_code = _required(party_code, "Party code")
        name = _required(name, "Party name")
        election = await self._get_editable_election(election_id)

        if await self._find_active_party(election.id, party_code):
            raise ConflictError(f"Party code '{party_code}' is already in use in this election")

        party = Party(
            election_id=election.id,
            party_code=party_code,
            name=name,
            symbol_path=symbol_path,
        )

        self.db.add(party)
        await self.db.commit()
        await self.db.refresh(party)

        logger.info("Party {} ({}) added to election {}", party.id, party.party_code, election.id)
        return party

    async def add_candidate(
        self,
        election_id: int,
        party_code: str,
        name: str,
        photo_path: Optional[str] = None
    ) -> Candidate:
        """Add a candidate under an existing active party of the election."""
        party_code = _required(party_code, "Party code")
        name = _required(name, "Candidate name")
        election = await self._get_editable_election(election_id)

        if not await self._find_active_party(election.id, party_code):
            raise ValidationError(f"Party '{party_code}' does not exist in this election")

        candidate = Candidate(
            election_id=election.id,
            party_code=party_code,
            name=name,
            photo_path=photo_path,
        )

        self.db.add(candidate)
        await self.db.commit()
        await self.db.refresh(candidate)

        logger.info("Candidate {} added to election {} under {}", candidate.id, election.id, party_code)
        return candidate

    async def remove_party(self, party_id: int) -> Party:
        """Retire a party and its candidates unless votes already reference its code."""
        party = await self.db.get(Party, party_id)
        if not party:
            raise NotFoundError("Party not found")

        result = await self.db.execute(
            select(func.count(Vote.id)).where(
                Vote.election_id == party.election_id,
                Vote.party_code == party.party_code
            )
        )
        vote_count = result.scalar_one()
        if vote_count > 0:
            raise ConflictError(
                f"Cannot delete party as it already has {vote_count} votes in this election. "
                "Reset the election first to remove it from the roster."
            )

        retired_candidates = 0
        if party.active:
            # Remaining candidates are retired along with their party
            result = await self.db.execute(
                select(Candidate).where(
                    Candidate.election_id == party.election_id,
                    Candidate.party_code == party.party_code,
                    Candidate.active.is_(True)
                )
            )
            for candidate in result.scalars():
                candidate.active = False
                retired_candidates += 1

        party.active = False
        await self.db.commit()

        logger.info(
            "Party {} retired from election {} with {} candidates",
            party.id, party.election_id, retired_candidates
        )
        return party

    async def remove_candidate(self, candidate_id: int) -> Candidate:
        """Retire a candidate unless votes in its election already reference it."""
        candidate = await self.db.get(Candidate, candidate_id)
        if not candidate:
            raise NotFoundError("Candidate not found")

        result = await self.db.execute(
            select(func.count(Vote.id)).where(
                Vote.election_id == candidate.election_id,
                Vote.candidate_id == candidate.id
            )
        )
        vote_count = result.scalar_one()
        if vote_count > 0:
            raise ConflictError(
                f"Cannot delete candidate as they already have {vote_count} votes. "
                "Reset the election first to remove them."
            )

        candidate.active = False
        await self.db.commit()

        logger.info("Candidate {} retired from election {}", candidate.id, candidate.election_id)
        return candidate

    async def get_roster(self, election_id: int) -> Tuple[List[Party], List[Candidate]]:
        """Get the active parties and candidates of an election."""
        election = await self.elections.get_election(election_id)

        parties = await self.db.execute(
            select(Party)
            .where(Party.election_id == election.id, Party.active.is_(True))
            .order_by(Party.id)
        )
        candidates = await self.db.execute(
            select(Candidate)
            .where(Candidate.election_id == election.id, Candidate.active.is_(True))
            .order_by(Candidate.id)
        )

        return list(parties.scalars().all()), list(candidates.scalars().all())

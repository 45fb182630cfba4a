"""
Election lifecycle service.
"""
from datetime import datetime
from typing import List, Optional, Tuple

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import delete, func, select

from evoting.core.exceptions import ConflictError, InvalidStateError, NotFoundError, ValidationError
from evoting.models.election import Election, Party, Candidate, ElectionStatus
from evoting.models.vote import Vote


# Allowed forward transitions; reset is handled separately and may run from any state
VALID_TRANSITIONS = {
    ElectionStatus.CREATED: [ElectionStatus.RUNNING],
    ElectionStatus.RUNNING: [ElectionStatus.ENDED],
    ElectionStatus.ENDED: [],
}


def _clean_name(name: Optional[str]) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Name is required")
    return cleaned


class ElectionService:
    """Service for election lifecycle operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_election(self, name: str) -> Election:
        """Create a new election in CREATED status."""
        election = Election(name=_clean_name(name), status=ElectionStatus.CREATED)

        self.db.add(election)
        await self.db.commit()
        await self.db.refresh(election)

        logger.info("Election {} '{}' created", election.id, election.name)
        return election

    async def get_election(self, election_id: int) -> Election:
        """Get an election by ID or raise NotFoundError."""
        result = await self.db.execute(
            select(Election).where(Election.id == election_id)
        )
        election = result.scalar_one_or_none()
        if not election:
            raise NotFoundError("Election not found")
        return election

    async def get_elections(
        self,
        status: Optional[ElectionStatus] = None
    ) -> List[Tuple[Election, int, int, int]]:
        """
        Get all elections newest first, optionally filtered by status.

        Returns:
            List of (election, party_count, candidate_count, vote_count)
        """
        party_count = (
            select(func.count(Party.id))
            .where(Party.election_id == Election.id, Party.active.is_(True))
            .correlate(Election)
            .scalar_subquery()
        )
        candidate_count = (
            select(func.count(Candidate.id))
            .where(Candidate.election_id == Election.id, Candidate.active.is_(True))
            .correlate(Election)
            .scalar_subquery()
        )
        vote_count = (
            select(func.count(Vote.id))
            .where(Vote.election_id == Election.id)
            .correlate(Election)
            .scalar_subquery()
        )

        query = select(Election, party_count, candidate_count, vote_count)

        if status:
            query = query.where(Election.status == status)

        if status == ElectionStatus.ENDED:
            query = query.order_by(Election.ended_at.desc(), Election.id.desc())
        else:
            query = query.order_by(Election.created_at.desc(), Election.id.desc())

        result = await self.db.execute(query)
        return [tuple(row) for row in result.all()]

    async def count_votes(self, election_id: int) -> int:
        result = await self.db.execute(
            select(func.count(Vote.id)).where(Vote.election_id == election_id)
        )
        return result.scalar_one()

    async def rename_election(self, election_id: int, name: str) -> Election:
        """Rename an election. Running elections cannot be renamed."""
        new_name = _clean_name(name)
        election = await self.get_election(election_id)

        if election.status == ElectionStatus.RUNNING:
            raise InvalidStateError("Cannot rename a running election")

        election.name = new_name
        await self.db.commit()
        await self.db.refresh(election)

        logger.info("Election {} renamed to '{}'", election.id, election.name)
        return election

    async def _transition(self, election_id: int, new_status: ElectionStatus) -> Election:
        election = await self.get_election(election_id)

        if new_status not in VALID_TRANSITIONS[election.status]:
            raise InvalidStateError(
                f"Invalid status transition from {election.status.value} to {new_status.value}"
            )

        election.status = new_status
        if new_status == ElectionStatus.RUNNING:
            election.started_at = datetime.utcnow()
        elif new_status == ElectionStatus.ENDED:
            election.ended_at = datetime.utcnow()

        await self.db.commit()
        await self.db.refresh(election)
        return election

    async def start_election(self, election_id: int) -> Election:
        """Open an election for voting (CREATED -> RUNNING)."""
        election = await self._transition(election_id, ElectionStatus.RUNNING)
        logger.info("Election {} started", election.id)
        return election

    async def stop_election(self, election_id: int) -> Election:
        """Close an election (RUNNING -> ENDED)."""
        election = await self._transition(election_id, ElectionStatus.ENDED)
        logger.info("Election {} ended", election.id)
        return election

    async def reset_election(self, election_id: int) -> int:
        """
        Delete every vote of the election and put it back to CREATED.

        Vote deletion and the status change are committed together; if either
        fails the whole reset is rolled back.

        Returns:
            Number of votes removed
        """
        election = await self.get_election(election_id)

        try:
            result = await self.db.execute(
                delete(Vote).where(Vote.election_id == election.id)
            )
            election.status = ElectionStatus.CREATED
            election.started_at = None
            election.ended_at = None
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.exception("Reset of election {} failed, rolled back", election_id)
            raise

        await self.db.refresh(election)
        logger.info("Election {} reset, {} votes removed", election_id, result.rowcount)
        return result.rowcount

    async def delete_election(self, election_id: int) -> None:
        """Delete an election and its roster. Blocked while votes exist."""
        election = await self.get_election(election_id)

        votes = await self.count_votes(election.id)
        if votes > 0:
            raise ConflictError(
                f"Cannot delete election with {votes} recorded votes. Reset it first."
            )

        await self.db.delete(election)
        await self.db.commit()

        logger.info("Election {} deleted", election_id)

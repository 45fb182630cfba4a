"""
Vote casting API endpoints.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from evoting.core.database import get_db
from evoting.services.vote_service import VoteService
from evoting.schemas.vote import (
    VoteCastRequest,
    VoteCastResponse,
    VoteStatusResponse,
)


router = APIRouter()


@router.post("", response_model=VoteCastResponse)
async def cast_vote(
    request: VoteCastRequest,
    db: AsyncSession = Depends(get_db)
) -> VoteCastResponse:
    """
    Cast a vote.

    Fails with:
    - 404 if the election does not exist
    - 400 (invalid_state) if the election is not running
    - 403 if the CNIC is not registered
    - 400 (invalid_input) if the candidate is not active in this election
    - 409 if this voter has already voted in this election
    """
    vote_service = VoteService(db)
    await vote_service.cast_vote(
        cnic=request.cnic,
        election_id=request.election_id,
        party_code=request.party_code,
        candidate_id=request.candidate_id
    )
    return VoteCastResponse()


@router.get("/status/{election_id}", response_model=VoteStatusResponse)
async def check_vote_status(
    election_id: int,
    cnic: str = Query(..., description="Voter's national identifier"),
    db: AsyncSession = Depends(get_db)
) -> VoteStatusResponse:
    """
    Check if a voter has already voted in an election.
    """
    vote_service = VoteService(db)
    has_voted = await vote_service.has_voted(cnic=cnic, election_id=election_id)
    return VoteStatusResponse(election_id=election_id, has_voted=has_voted)

"""
Roster API endpoints for parties and candidates.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from evoting.core.database import get_db
from evoting.services.roster_service import RosterService
from evoting.models.admin import Admin
from evoting.schemas.election import (
    PartyCreate,
    PartyResponse,
    CandidateCreate,
    CandidateResponse,
    RosterResponse,
    CreatedResponse,
    OkResponse,
)
from evoting.api.v1.deps import require_admin


router = APIRouter()


@router.get("/elections/{election_id}/roster", response_model=RosterResponse)
async def get_roster(
    election_id: int,
    db: AsyncSession = Depends(get_db)
) -> RosterResponse:
    """
    Get the active parties and candidates of an election.
    """
    roster_service = RosterService(db)
    parties, candidates = await roster_service.get_roster(election_id)

    return RosterResponse(
        election_id=election_id,
        parties=[
            PartyResponse(
                id=p.id,
                election_id=p.election_id,
                party_code=p.party_code,
                name=p.name,
                symbol_path=p.symbol_path
            )
            for p in parties
        ],
        candidates=[
            CandidateResponse(
                id=c.id,
                election_id=c.election_id,
                party_code=c.party_code,
                name=c.name,
                photo_path=c.photo_path
            )
            for c in candidates
        ]
    )


@router.post(
    "/elections/{election_id}/parties",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED
)
async def add_party(
    election_id: int,
    party_data: PartyCreate,
    db: AsyncSession = Depends(get_db),
    current_admin: Admin = Depends(require_admin)
) -> CreatedResponse:
    """
    Add a party to an election that has not ended.
    """
    roster_service = RosterService(db)
    party = await roster_service.add_party(
        election_id=election_id,
        party_code=party_data.party_code,
        name=party_data.name,
        symbol_path=party_data.symbol_path
    )
    return CreatedResponse(id=party.id)


@router.post(
    "/elections/{election_id}/candidates",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED
)
async def add_candidate(
    election_id: int,
    candidate_data: CandidateCreate,
    db: AsyncSession = Depends(get_db),
    current_admin: Admin = Depends(require_admin)
) -> CreatedResponse:
    """
    Add a candidate under one of the election's active parties.
    """
    roster_service = RosterService(db)
    candidate = await roster_service.add_candidate(
        election_id=election_id,
        party_code=candidate_data.party_code,
        name=candidate_data.name,
        photo_path=candidate_data.photo_path
    )
    return CreatedResponse(id=candidate.id)


@router.delete("/parties/{party_id}", response_model=OkResponse)
async def remove_party(
    party_id: int,
    db: AsyncSession = Depends(get_db),
    current_admin: Admin = Depends(require_admin)
) -> OkResponse:
    """
    Retire a party from its roster. Refused once votes reference it.
    """
    roster_service = RosterService(db)
    await roster_service.remove_party(party_id)
    return OkResponse(message="Party removed")


@router.delete("/candidates/{candidate_id}", response_model=OkResponse)
async def remove_candidate(
    candidate_id: int,
    db: AsyncSession = Depends(get_db),
    current_admin: Admin = Depends(require_admin)
) -> OkResponse:
    """
    Retire a candidate from its roster. Refused once votes reference them.
    """
    roster_service = RosterService(db)
    await roster_service.remove_candidate(candidate_id)
    return OkResponse(message="Candidate removed")

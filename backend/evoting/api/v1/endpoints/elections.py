"""
Election lifecycle API endpoints.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from evoting.core.database import get_db
from evoting.core.exceptions import ValidationError
from evoting.services.election_service import ElectionService
from evoting.models.admin import Admin
from evoting.models.election import Election, ElectionStatus
from evoting.schemas.election import (
    ElectionCreate,
    ElectionUpdate,
    ElectionResponse,
    ElectionListResponse,
    CreatedResponse,
    OkResponse,
)
from evoting.api.v1.deps import require_admin


router = APIRouter()


def _election_response(election: Election) -> ElectionResponse:
    return ElectionResponse(
        id=election.id,
        name=election.name,
        status=election.status.value,
        created_at=election.created_at,
        started_at=election.started_at,
        ended_at=election.ended_at
    )


def _list_response(rows) -> List[ElectionListResponse]:
    return [
        ElectionListResponse(
            id=e.id,
            name=e.name,
            status=e.status.value,
            created_at=e.created_at,
            started_at=e.started_at,
            ended_at=e.ended_at,
            party_count=party_count,
            candidate_count=candidate_count,
            vote_count=vote_count
        )
        for e, party_count, candidate_count, vote_count in rows
    ]


@router.get("", response_model=List[ElectionListResponse])
async def list_elections(
    status_filter: Optional[str] = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db)
) -> List[ElectionListResponse]:
    """
    Get all elections, newest first, with roster and vote counts.
    """
    status_enum = None
    if status_filter:
        try:
            status_enum = ElectionStatus(status_filter.upper())
        except ValueError:
            raise ValidationError(f"Invalid status: {status_filter}")

    election_service = ElectionService(db)
    rows = await election_service.get_elections(status=status_enum)
    return _list_response(rows)


@router.get("/ended", response_model=List[ElectionListResponse])
async def list_ended_elections(
    db: AsyncSession = Depends(get_db)
) -> List[ElectionListResponse]:
    """
    Get ended elections, most recently ended first.
    """
    election_service = ElectionService(db)
    rows = await election_service.get_elections(status=ElectionStatus.ENDED)
    return _list_response(rows)


@router.get("/{election_id}", response_model=ElectionResponse)
async def get_election(
    election_id: int,
    db: AsyncSession = Depends(get_db)
) -> ElectionResponse:
    """
    Get a specific election by ID.
    """
    election_service = ElectionService(db)
    election = await election_service.get_election(election_id)
    return _election_response(election)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_election(
    election_data: ElectionCreate,
    db: AsyncSession = Depends(get_db),
    current_admin: Admin = Depends(require_admin)
) -> CreatedResponse:
    """
    Create a new election in CREATED status.
    """
    election_service = ElectionService(db)
    election = await election_service.create_election(election_data.name)
    return CreatedResponse(id=election.id)


@router.patch("/{election_id}", response_model=OkResponse)
async def rename_election(
    election_id: int,
    election_data: ElectionUpdate,
    db: AsyncSession = Depends(get_db),
    current_admin: Admin = Depends(require_admin)
) -> OkResponse:
    """
    Rename an election. Running elections cannot be renamed.
    """
    election_service = ElectionService(db)
    await election_service.rename_election(election_id, election_data.name)
    return OkResponse()


@router.post("/{election_id}/start", response_model=OkResponse)
async def start_election(
    election_id: int,
    db: AsyncSession = Depends(get_db),
    current_admin: Admin = Depends(require_admin)
) -> OkResponse:
    """
    Open voting. Only CREATED elections can be started.
    """
    election_service = ElectionService(db)
    await election_service.start_election(election_id)
    return OkResponse(message="Election started")


@router.post("/{election_id}/stop", response_model=OkResponse)
async def stop_election(
    election_id: int,
    db: AsyncSession = Depends(get_db),
    current_admin: Admin = Depends(require_admin)
) -> OkResponse:
    """
    Close voting. Only RUNNING elections can be stopped.
    """
    election_service = ElectionService(db)
    await election_service.stop_election(election_id)
    return OkResponse(message="Election ended")


@router.post("/{election_id}/reset", response_model=OkResponse)
async def reset_election(
    election_id: int,
    db: AsyncSession = Depends(get_db),
    current_admin: Admin = Depends(require_admin)
) -> OkResponse:
    """
    Remove all votes and return the election to CREATED.
    """
    election_service = ElectionService(db)
    removed = await election_service.reset_election(election_id)
    return OkResponse(message=f"Election reset successfully. {removed} votes removed.")


@router.delete("/{election_id}", response_model=OkResponse)
async def delete_election(
    election_id: int,
    db: AsyncSession = Depends(get_db),
    current_admin: Admin = Depends(require_admin)
) -> OkResponse:
    """
    Delete an election and its roster. Refused while votes exist.
    """
    election_service = ElectionService(db)
    await election_service.delete_election(election_id)
    return OkResponse(message="Election deleted")

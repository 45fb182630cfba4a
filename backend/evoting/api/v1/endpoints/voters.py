"""
Voter registration API endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from evoting.core.database import get_db
from evoting.services.voter_service import VoterService
from evoting.schemas.voter import (
    VoterRegisterRequest,
    VoterLoginRequest,
    VoterResponse,
)


router = APIRouter()


@router.post("/register", response_model=VoterResponse, status_code=status.HTTP_201_CREATED)
async def register_voter(
    request: VoterRegisterRequest,
    db: AsyncSession = Depends(get_db)
) -> VoterResponse:
    """
    Register a voter. Each CNIC can register once, whichever way it is written.
    """
    voter_service = VoterService(db)
    voter = await voter_service.register_voter(
        name=request.name,
        cnic=request.cnic,
        father_name=request.father_name,
        address=request.address,
        profile_pic_name=request.profile_pic_name
    )
    return VoterResponse(cnic=voter.cnic)


@router.post("/login", response_model=VoterResponse)
async def login_voter(
    request: VoterLoginRequest,
    db: AsyncSession = Depends(get_db)
) -> VoterResponse:
    """
    Confirm the CNIC is registered.
    """
    voter_service = VoterService(db)
    voter = await voter_service.login(request.cnic)
    return VoterResponse(cnic=voter.cnic)
